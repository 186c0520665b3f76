"""Persistence helpers for chat message entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from app.domain.entities import Message, statuses_preceding
from app.infrastructure.models import MessageModel
from app.utils import from_storage_datetime, now_in_app_timezone, to_storage_datetime


class MessageRepository:
    """Provide storage operations for :class:`Message` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, message_id: str) -> Message | None:
        model = self.session.get(MessageModel, message_id)
        if model is None:
            return None
        return self._to_entity(model)

    def create(self, message: Message) -> Message:
        model = MessageModel()
        self._apply_entity_to_model(model, message)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(
        self,
        message_id: str,
        status: str,
        *,
        sender_id: str | None = None,
        recipient_id: str | None = None,
    ) -> bool:
        """Move ``message_id`` forward to ``status`` in a single statement.

        ``sender_id`` and ``recipient_id``, when given, must match the stored
        participants. Returns ``False`` when no message matched: the id is
        unknown, a participant differs, or the stored status is already past
        ``status``.
        """

        query = self.session.query(MessageModel).filter(
            MessageModel.id == message_id,
            MessageModel.status.in_(statuses_preceding(status)),
        )
        if sender_id is not None:
            query = query.filter(MessageModel.sender_id == sender_id)
        if recipient_id is not None:
            query = query.filter(MessageModel.recipient_id == recipient_id)
        updated = query.update({MessageModel.status: status}, synchronize_session=False)
        self.session.commit()
        return updated > 0

    def list_conversation(
        self, user_id: str, other_user_id: str, *, limit: int | None = None
    ) -> Sequence[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(
                or_(
                    and_(
                        MessageModel.sender_id == user_id,
                        MessageModel.recipient_id == other_user_id,
                    ),
                    and_(
                        MessageModel.sender_id == other_user_id,
                        MessageModel.recipient_id == user_id,
                    ),
                )
            )
            .order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_inbox(self, user_id: str, *, limit: int | None = None) -> Sequence[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(MessageModel.recipient_id == user_id)
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_sent(self, user_id: str, *, limit: int | None = None) -> Sequence[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(MessageModel.sender_id == user_id)
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _apply_entity_to_model(model: MessageModel, message: Message) -> None:
        model.id = message.id
        model.sender_id = message.sender_id
        model.sender_username = message.sender_username
        model.recipient_id = message.recipient_id
        model.text = message.text
        model.status = message.status
        model.created_at = to_storage_datetime(
            message.created_at or now_in_app_timezone()
        )

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            sender_id=model.sender_id,
            sender_username=model.sender_username,
            recipient_id=model.recipient_id,
            text=model.text,
            status=model.status,
            created_at=from_storage_datetime(model.created_at),
        )


__all__ = ["MessageRepository"]
