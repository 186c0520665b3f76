"""Arguments accepted by the realtime hub invocations."""

from __future__ import annotations

from pydantic import Field

from .message import CamelModel
from .notification import NotificationSendRequest


class HubFrame(CamelModel):
    """Envelope of every frame exchanged over a hub websocket."""

    type: str = Field(..., min_length=1)
    data: dict | None = None


class SendMessageArguments(CamelModel):
    sender_id: str = ""
    sender_username: str = ""
    recipient_id: str = ""
    text: str = ""


class MarkAsSeenArguments(CamelModel):
    message_id: str = ""
    original_sender_id: str = ""


class SendNotificationArguments(NotificationSendRequest):
    pass


class MarkNotificationAsReadArguments(CamelModel):
    notification_id: str = ""


__all__ = [
    "HubFrame",
    "MarkAsSeenArguments",
    "MarkNotificationAsReadArguments",
    "SendMessageArguments",
    "SendNotificationArguments",
]
