"""Domain entity representing a realtime user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Notification:
    """Ephemeral notice pushed once to every live connection of a user.

    Notifications are never stored by the realtime layer; read state belongs to
    whichever API keeps the notification history.
    """

    user_id: str
    title: str
    message: str
    timestamp: datetime
    type: str | None = None
    reference_id: str | None = None


__all__ = ["Notification"]
