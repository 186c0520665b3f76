"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .message import CamelModel


class NotificationSendRequest(CamelModel):
    """Notification to push to every live connection of ``user_id``."""

    user_id: str = Field(default="", description="Identity of the user to notify")
    title: str = Field(default="", max_length=200, description="Short headline")
    message: str = Field(default="", max_length=1000, description="Notification body")
    type: str | None = Field(
        default=None, max_length=50, description="Classification such as info or warning"
    )
    reference_id: str | None = Field(
        default=None, description="Identifier of the related domain object"
    )


class NotificationRead(CamelModel):
    """Representation of a notification as it was pushed."""

    title: str
    message: str
    type: str | None = None
    reference_id: str | None = None
    timestamp: datetime


__all__ = ["NotificationRead", "NotificationSendRequest"]
