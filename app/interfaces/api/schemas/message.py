"""Pydantic models describing chat message payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys and accepting either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageSendRequest(CamelModel):
    """Message sent through the REST API by the authenticated user."""

    sender_username: str = Field(..., min_length=1, description="Display name of the sender")
    recipient_id: str = Field(..., min_length=1, description="Identity of the recipient")
    text: str = Field(..., min_length=1, description="Message body")


class MessageRead(CamelModel):
    """Representation of a stored chat message."""

    id: str
    sender_id: str
    sender_username: str
    recipient_id: str
    text: str
    status: str
    created_at: datetime | None = None


class MessageSeenResponse(CamelModel):
    id: str
    status: str


__all__ = ["CamelModel", "MessageRead", "MessageSendRequest", "MessageSeenResponse"]
