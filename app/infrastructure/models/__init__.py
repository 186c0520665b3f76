"""SQLAlchemy ORM models."""

from .message import MessageModel

__all__ = ["MessageModel"]
