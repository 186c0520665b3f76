"""Domain entity representing a direct chat message between two users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

MESSAGE_STATUS_SENT = "sent"
MESSAGE_STATUS_DELIVERED = "delivered"
MESSAGE_STATUS_SEEN = "seen"

# Forward order of the lifecycle; a status may only move to the right.
MESSAGE_STATUS_ORDER: tuple[str, ...] = (
    MESSAGE_STATUS_SENT,
    MESSAGE_STATUS_DELIVERED,
    MESSAGE_STATUS_SEEN,
)


def statuses_preceding(status: str) -> tuple[str, ...]:
    """Return the statuses a message may hold before moving to ``status``.

    ``status`` itself is included so repeating a transition is accepted as a
    no-op instead of being mistaken for a missing message.
    """

    if status not in MESSAGE_STATUS_ORDER:
        msg = f"Unknown message status '{status}'"
        raise ValueError(msg)
    return MESSAGE_STATUS_ORDER[: MESSAGE_STATUS_ORDER.index(status) + 1]


@dataclass
class Message:
    """Chat message persisted before it is pushed to the recipient."""

    id: str
    sender_id: str
    sender_username: str
    recipient_id: str
    text: str
    status: str = MESSAGE_STATUS_SENT
    created_at: datetime | None = None


__all__ = [
    "Message",
    "MESSAGE_STATUS_SENT",
    "MESSAGE_STATUS_DELIVERED",
    "MESSAGE_STATUS_SEEN",
    "MESSAGE_STATUS_ORDER",
    "statuses_preceding",
]
