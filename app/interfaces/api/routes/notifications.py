"""Endpoint to push notifications from server-side callers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.application.use_cases.realtime import NotificationChannel
from app.domain.entities import Notification
from app.interfaces.api.dependencies import (
    get_current_identity,
    get_notification_channel,
    raise_for_failure,
)
from app.interfaces.api.schemas import NotificationRead, NotificationSendRequest

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        title=notification.title,
        message=notification.message,
        type=notification.type,
        reference_id=notification.reference_id,
        timestamp=notification.timestamp,
    )


@router.post("/send", response_model=NotificationRead, status_code=status.HTTP_202_ACCEPTED)
async def send_notification(
    payload: NotificationSendRequest,
    _: str = Depends(get_current_identity),
    channel: NotificationChannel = Depends(get_notification_channel),
) -> NotificationRead:
    """Push a notification to the live connections of ``payload.user_id``.

    Users without live connections never see it; there is no queue.
    """

    outcome = await channel.send_notification(
        payload.user_id,
        payload.title,
        payload.message,
        payload.type,
        payload.reference_id,
    )
    raise_for_failure(outcome)
    return _notification_to_schema(outcome.value)
