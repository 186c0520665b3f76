"""Endpoints to send and query direct chat messages."""

from __future__ import annotations

from collections.abc import Awaitable, Sequence
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.use_cases.realtime import ChatDeliveryOrchestrator
from app.config import get_settings
from app.domain.entities import MESSAGE_STATUS_SEEN, Message
from app.infrastructure.repositories import MessageStore, MessageStoreError
from app.interfaces.api.dependencies import (
    get_chat_orchestrator,
    get_current_identity,
    get_message_store,
    raise_for_failure,
)
from app.interfaces.api.schemas import MessageRead, MessageSeenResponse, MessageSendRequest

router = APIRouter(prefix="/messages", tags=["messages"])

T = TypeVar("T")


def _message_to_schema(message: Message) -> MessageRead:
    return MessageRead(
        id=message.id,
        sender_id=message.sender_id,
        sender_username=message.sender_username,
        recipient_id=message.recipient_id,
        text=message.text,
        status=message.status,
        created_at=message.created_at,
    )


def _history_limit() -> int:
    return get_settings().message_history_limit


async def _read(query: Awaitable[T]) -> T:
    try:
        return await query
    except MessageStoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc


def _to_schemas(messages: Sequence[Message]) -> list[MessageRead]:
    return [_message_to_schema(message) for message in messages]


@router.post("/", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def send_message(
    payload: MessageSendRequest,
    identity: str = Depends(get_current_identity),
    orchestrator: ChatDeliveryOrchestrator = Depends(get_chat_orchestrator),
) -> MessageRead:
    """Store a message from the authenticated user and push it to the recipient."""

    outcome = await orchestrator.send_message(
        identity, payload.sender_username, payload.recipient_id, payload.text
    )
    raise_for_failure(outcome)
    return _message_to_schema(outcome.value)


@router.get("/conversation/{other_user_id}", response_model=list[MessageRead])
async def get_conversation(
    other_user_id: str,
    identity: str = Depends(get_current_identity),
    store: MessageStore = Depends(get_message_store),
) -> list[MessageRead]:
    """Return the messages exchanged with ``other_user_id``, oldest first."""

    messages = await _read(
        store.list_conversation(identity, other_user_id, limit=_history_limit())
    )
    return _to_schemas(messages)


@router.get("/inbox", response_model=list[MessageRead])
async def get_inbox(
    identity: str = Depends(get_current_identity),
    store: MessageStore = Depends(get_message_store),
) -> list[MessageRead]:
    """Return the messages received by the authenticated user, newest first."""

    messages = await _read(store.list_inbox(identity, limit=_history_limit()))
    return _to_schemas(messages)


@router.get("/sent", response_model=list[MessageRead])
async def get_sent(
    identity: str = Depends(get_current_identity),
    store: MessageStore = Depends(get_message_store),
) -> list[MessageRead]:
    """Return the messages sent by the authenticated user, newest first."""

    messages = await _read(store.list_sent(identity, limit=_history_limit()))
    return _to_schemas(messages)


@router.get("/{message_id}", response_model=MessageRead)
async def get_message(
    message_id: str,
    identity: str = Depends(get_current_identity),
    store: MessageStore = Depends(get_message_store),
) -> MessageRead:
    """Return a single message; only its sender and recipient can see it."""

    message = await _read(store.get(message_id))
    if message is None or identity not in (message.sender_id, message.recipient_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return _message_to_schema(message)


@router.post("/{message_id}/seen", response_model=MessageSeenResponse)
async def mark_message_seen(
    message_id: str,
    identity: str = Depends(get_current_identity),
    store: MessageStore = Depends(get_message_store),
    orchestrator: ChatDeliveryOrchestrator = Depends(get_chat_orchestrator),
) -> MessageSeenResponse:
    """Mark a received message as seen and notify its sender."""

    message = await _read(store.get(message_id))
    if message is None or message.recipient_id != identity:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")

    outcome = await orchestrator.mark_as_seen(message_id, message.sender_id, reader_id=identity)
    raise_for_failure(outcome)
    if not outcome.value:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return MessageSeenResponse(id=message_id, status=MESSAGE_STATUS_SEEN)
