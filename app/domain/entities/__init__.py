"""Domain entities exposed by the application."""

from .delivery import DeliveryFailure, DeliveryOutcome, ErrorKind
from .message import (
    MESSAGE_STATUS_DELIVERED,
    MESSAGE_STATUS_ORDER,
    MESSAGE_STATUS_SEEN,
    MESSAGE_STATUS_SENT,
    Message,
    statuses_preceding,
)
from .notification import Notification

__all__ = [
    "DeliveryFailure",
    "DeliveryOutcome",
    "ErrorKind",
    "Message",
    "MESSAGE_STATUS_SENT",
    "MESSAGE_STATUS_DELIVERED",
    "MESSAGE_STATUS_SEEN",
    "MESSAGE_STATUS_ORDER",
    "statuses_preceding",
    "Notification",
]
