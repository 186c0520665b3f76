"""Store-then-push delivery of direct chat messages."""

from __future__ import annotations

import logging
from uuid import uuid4

from app.domain.entities import (
    MESSAGE_STATUS_SEEN,
    MESSAGE_STATUS_SENT,
    DeliveryOutcome,
    ErrorKind,
    Message,
)
from app.infrastructure.realtime import RealtimeConnectionManager
from app.infrastructure.repositories import MessageStore, MessageStoreError
from app.utils import now_in_app_timezone

from .events import MESSAGE_DELIVERED, MESSAGE_SEEN, RECEIVE_MESSAGE
from .payloads import serialize_message
from .validators import missing_fields

logger = logging.getLogger(__name__)


class ChatDeliveryOrchestrator:
    """Persist chat messages and relay their lifecycle to live connections.

    ``MessageDelivered`` is sent to the sender as soon as the message is
    stored, whether or not the recipient is online; it means "accepted" and
    is not written to the store.
    """

    def __init__(self, store: MessageStore, manager: RealtimeConnectionManager) -> None:
        self._store = store
        self._manager = manager

    async def send_message(
        self,
        sender_id: str,
        sender_username: str,
        recipient_id: str,
        text: str,
    ) -> DeliveryOutcome[Message]:
        missing = missing_fields(
            senderId=sender_id,
            senderUsername=sender_username,
            recipientId=recipient_id,
            text=text,
        )
        if missing:
            return DeliveryOutcome.failure(
                ErrorKind.VALIDATION, f"Missing required fields: {', '.join(missing)}"
            )

        message = Message(
            id=uuid4().hex,
            sender_id=sender_id,
            sender_username=sender_username,
            recipient_id=recipient_id,
            text=text,
            status=MESSAGE_STATUS_SENT,
            created_at=now_in_app_timezone(),
        )
        try:
            await self._store.save(message)
        except MessageStoreError as exc:
            return DeliveryOutcome.failure(ErrorKind.PERSISTENCE, str(exc))

        received = await self._manager.send_to_user(
            recipient_id, RECEIVE_MESSAGE, serialize_message(message)
        )
        if not received:
            logger.debug(
                "Recipient %s offline; message %s kept in the store", recipient_id, message.id
            )
        await self._manager.send_to_user(sender_id, MESSAGE_DELIVERED, message.id)
        return DeliveryOutcome.success(message)

    async def mark_as_seen(
        self,
        message_id: str,
        original_sender_id: str,
        reader_id: str | None = None,
    ) -> DeliveryOutcome[bool]:
        """Mark ``message_id`` as seen and tell its sender.

        The message must have been sent by ``original_sender_id`` and, when
        ``reader_id`` is given, received by ``reader_id``. Anything else,
        including an unknown id, is not an error: the outcome succeeds with
        ``False`` and nothing is pushed.
        """

        missing = missing_fields(messageId=message_id, originalSenderId=original_sender_id)
        if missing:
            return DeliveryOutcome.failure(
                ErrorKind.VALIDATION, f"Missing required fields: {', '.join(missing)}"
            )

        try:
            updated = await self._store.update_status(
                message_id,
                MESSAGE_STATUS_SEEN,
                sender_id=original_sender_id,
                recipient_id=reader_id,
            )
        except MessageStoreError as exc:
            return DeliveryOutcome.failure(ErrorKind.PERSISTENCE, str(exc))

        if not updated:
            logger.debug("Ignoring seen receipt for unmatched message %s", message_id)
            return DeliveryOutcome.success(False)

        await self._manager.send_to_user(original_sender_id, MESSAGE_SEEN, message_id)
        return DeliveryOutcome.success(True)


__all__ = ["ChatDeliveryOrchestrator"]
