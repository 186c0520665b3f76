"""Use cases delivering chat messages and notifications over live connections."""

from .chat import ChatDeliveryOrchestrator
from .events import (
    MESSAGE_DELIVERED,
    MESSAGE_SEEN,
    NOTIFICATION_MARKED_AS_READ,
    RECEIVE_MESSAGE,
    RECEIVE_NOTIFICATION,
)
from .notifications import NotificationChannel
from .payloads import serialize_message, serialize_notification

__all__ = [
    "ChatDeliveryOrchestrator",
    "NotificationChannel",
    "RECEIVE_MESSAGE",
    "MESSAGE_DELIVERED",
    "MESSAGE_SEEN",
    "RECEIVE_NOTIFICATION",
    "NOTIFICATION_MARKED_AS_READ",
    "serialize_message",
    "serialize_notification",
]
