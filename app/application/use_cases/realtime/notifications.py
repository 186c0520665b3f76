"""Push surface for user notifications."""

from __future__ import annotations

import logging

from app.domain.entities import DeliveryOutcome, ErrorKind, Notification
from app.infrastructure.realtime import RealtimeConnectionManager
from app.utils import now_in_app_timezone

from .events import NOTIFICATION_MARKED_AS_READ, RECEIVE_NOTIFICATION
from .payloads import serialize_notification
from .validators import missing_fields

logger = logging.getLogger(__name__)


class NotificationChannel:
    """Construct notifications and push them to the live connections of a user.

    Nothing is stored here: a user without live connections simply misses the
    push, and read receipts are echoed back without touching any read state.
    """

    def __init__(self, manager: RealtimeConnectionManager) -> None:
        self._manager = manager

    async def send_notification(
        self,
        user_id: str,
        title: str,
        message: str,
        notification_type: str | None = None,
        reference_id: str | None = None,
    ) -> DeliveryOutcome[Notification]:
        if missing_fields(userId=user_id):
            return DeliveryOutcome.failure(ErrorKind.VALIDATION, "userId is required")

        notification = Notification(
            user_id=user_id,
            title=title,
            message=message,
            type=notification_type,
            reference_id=reference_id,
            timestamp=now_in_app_timezone(),
        )
        try:
            delivered = await self._manager.send_to_user(
                user_id, RECEIVE_NOTIFICATION, serialize_notification(notification)
            )
        except Exception:
            logger.exception("Error sending notification to user %s", user_id)
            raise

        logger.info(
            "Notification sent to user %s: %s (%d connection(s))", user_id, title, delivered
        )
        return DeliveryOutcome.success(notification)

    async def mark_notification_as_read(
        self,
        caller_user_id: str | None,
        connection_id: str,
        notification_id: str,
    ) -> DeliveryOutcome[str]:
        """Echo a read receipt back to the calling connection only."""

        if not caller_user_id:
            return DeliveryOutcome.failure(ErrorKind.UNAUTHORIZED, "User not authenticated")
        if missing_fields(notificationId=notification_id):
            return DeliveryOutcome.failure(ErrorKind.VALIDATION, "notificationId is required")

        await self._manager.send_to_connection(
            connection_id, NOTIFICATION_MARKED_AS_READ, notification_id
        )
        return DeliveryOutcome.success(notification_id)


__all__ = ["NotificationChannel"]
