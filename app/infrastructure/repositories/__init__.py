"""Repository implementations for infrastructure layer."""

from .message_repository import MessageRepository
from .message_store import MessageStore, MessageStoreError

__all__ = [
    "MessageRepository",
    "MessageStore",
    "MessageStoreError",
]
