"""JSON representations of realtime payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from app.domain.entities import Message, Notification


def serialize_message(message: Message) -> dict[str, Any]:
    """Return the ``ReceiveMessage`` payload for ``message``."""

    return {
        "id": message.id,
        "senderId": message.sender_id,
        "senderUsername": message.sender_username,
        "recipientId": message.recipient_id,
        "text": message.text,
        "status": message.status,
        "createdAt": _iso_or_none(message.created_at),
    }


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the ``ReceiveNotification`` payload for ``notification``."""

    return {
        "title": notification.title,
        "message": notification.message,
        "type": notification.type,
        "referenceId": notification.reference_id,
        "timestamp": _iso_or_none(notification.timestamp),
    }


def _iso_or_none(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


__all__ = ["serialize_message", "serialize_notification"]
