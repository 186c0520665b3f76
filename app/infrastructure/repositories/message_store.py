"""Awaitable message store backed by :class:`MessageRepository`."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from functools import partial
from typing import TypeVar

from anyio import to_thread
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Message

from .message_repository import MessageRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MessageStoreError(RuntimeError):
    """Raised when the message store cannot complete a read or write."""


class MessageStore:
    """Run repository calls on worker threads so websocket handlers can await them.

    Every call opens its own session, which keeps concurrent handlers from
    sharing ORM state.
    """

    def __init__(self, session_factory: Callable[[], Session] | None = None) -> None:
        if session_factory is None:
            from app.infrastructure.database import SessionLocal

            session_factory = SessionLocal
        self._session_factory = session_factory

    async def save(self, message: Message) -> str:
        saved = await self._run(MessageRepository.create, message)
        return saved.id

    async def update_status(
        self,
        message_id: str,
        status: str,
        *,
        sender_id: str | None = None,
        recipient_id: str | None = None,
    ) -> bool:
        return await self._run(
            partial(
                MessageRepository.update_status,
                sender_id=sender_id,
                recipient_id=recipient_id,
            ),
            message_id,
            status,
        )

    async def get(self, message_id: str) -> Message | None:
        return await self._run(MessageRepository.get, message_id)

    async def list_conversation(
        self, user_id: str, other_user_id: str, *, limit: int | None = None
    ) -> Sequence[Message]:
        return await self._run(
            partial(MessageRepository.list_conversation, limit=limit),
            user_id,
            other_user_id,
        )

    async def list_inbox(self, user_id: str, *, limit: int | None = None) -> Sequence[Message]:
        return await self._run(partial(MessageRepository.list_inbox, limit=limit), user_id)

    async def list_sent(self, user_id: str, *, limit: int | None = None) -> Sequence[Message]:
        return await self._run(partial(MessageRepository.list_sent, limit=limit), user_id)

    async def _run(self, operation: Callable[..., T], *args: object) -> T:
        return await to_thread.run_sync(partial(self._call, operation, *args))

    def _call(self, operation: Callable[..., T], *args: object) -> T:
        session = self._session_factory()
        try:
            return operation(MessageRepository(session), *args)
        except SQLAlchemyError as exc:
            session.rollback()
            logger.exception("Message store operation %s failed", _operation_name(operation))
            raise MessageStoreError("The message store is unavailable") from exc
        finally:
            session.close()


def _operation_name(operation: Callable[..., object]) -> str:
    target = operation.func if isinstance(operation, partial) else operation
    return getattr(target, "__name__", repr(target))


__all__ = ["MessageStore", "MessageStoreError"]
