from .hub import (
    HubFrame,
    MarkAsSeenArguments,
    MarkNotificationAsReadArguments,
    SendMessageArguments,
    SendNotificationArguments,
)
from .message import CamelModel, MessageRead, MessageSeenResponse, MessageSendRequest
from .notification import NotificationRead, NotificationSendRequest

__all__ = [
    "CamelModel",
    "HubFrame",
    "MarkAsSeenArguments",
    "MarkNotificationAsReadArguments",
    "MessageRead",
    "MessageSeenResponse",
    "MessageSendRequest",
    "NotificationRead",
    "NotificationSendRequest",
    "SendMessageArguments",
    "SendNotificationArguments",
]
