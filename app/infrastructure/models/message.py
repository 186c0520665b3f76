"""SQLAlchemy model for persisted chat messages."""

from sqlalchemy import Column, DateTime, Index, String, Text

from app.domain.entities import MESSAGE_STATUS_SENT
from app.infrastructure.database import Base


class MessageModel(Base):
    """Database representation for direct messages."""

    __tablename__ = "message"
    __table_args__ = (
        Index("ix_message_sender_recipient", "sender_id", "recipient_id"),
    )

    id = Column(String(32), primary_key=True)
    sender_id = Column(String(64), nullable=False, index=True)
    sender_username = Column(String(120), nullable=False)
    recipient_id = Column(String(64), nullable=False, index=True)
    text = Column(Text, nullable=False)
    status = Column(String(16), nullable=False, default=MESSAGE_STATUS_SENT)
    created_at = Column(DateTime(), nullable=False, index=True)


__all__ = ["MessageModel"]
