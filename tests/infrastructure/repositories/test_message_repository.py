"""Tests for message persistence."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.entities import (
    MESSAGE_STATUS_DELIVERED,
    MESSAGE_STATUS_SEEN,
    MESSAGE_STATUS_SENT,
    Message,
    statuses_preceding,
)
from app.infrastructure.repositories import MessageRepository

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _message(message_id: str, sender: str, recipient: str, minutes: int = 0) -> Message:
    return Message(
        id=message_id,
        sender_id=sender,
        sender_username=sender.title(),
        recipient_id=recipient,
        text=f"{message_id} from {sender}",
        status=MESSAGE_STATUS_SENT,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


@pytest.fixture
def repository(session_factory):
    session = session_factory()
    try:
        yield MessageRepository(session)
    finally:
        session.close()


def test_created_message_is_retrievable(repository: MessageRepository) -> None:
    repository.create(_message("m1", "alice", "bob"))

    stored = repository.get("m1")

    assert stored is not None
    assert stored.status == MESSAGE_STATUS_SENT
    assert stored.text == "m1 from alice"
    assert stored.created_at == BASE_TIME
    assert repository.get("missing") is None


def test_mark_seen_updates_existing_message(repository: MessageRepository) -> None:
    repository.create(_message("m1", "alice", "bob"))

    assert repository.update_status("m1", MESSAGE_STATUS_SEEN) is True
    assert repository.update_status("m1", MESSAGE_STATUS_SEEN) is True
    assert repository.get("m1").status == MESSAGE_STATUS_SEEN


def test_update_status_of_unknown_message_is_a_no_op(repository: MessageRepository) -> None:
    assert repository.update_status("missing", MESSAGE_STATUS_SEEN) is False


def test_update_status_requires_matching_participants(repository: MessageRepository) -> None:
    repository.create(_message("m1", "alice", "bob"))

    assert repository.update_status("m1", MESSAGE_STATUS_SEEN, recipient_id="mallory") is False
    assert repository.update_status("m1", MESSAGE_STATUS_SEEN, sender_id="mallory") is False
    assert repository.get("m1").status == MESSAGE_STATUS_SENT

    assert (
        repository.update_status(
            "m1", MESSAGE_STATUS_SEEN, sender_id="alice", recipient_id="bob"
        )
        is True
    )
    assert repository.get("m1").status == MESSAGE_STATUS_SEEN


def test_seen_message_never_moves_back(repository: MessageRepository) -> None:
    repository.create(_message("m1", "alice", "bob"))
    repository.update_status("m1", MESSAGE_STATUS_SEEN)

    assert repository.update_status("m1", MESSAGE_STATUS_DELIVERED) is False
    assert repository.update_status("m1", MESSAGE_STATUS_SENT) is False
    assert repository.get("m1").status == MESSAGE_STATUS_SEEN


def test_history_queries(repository: MessageRepository) -> None:
    repository.create(_message("m1", "alice", "bob", minutes=0))
    repository.create(_message("m2", "bob", "alice", minutes=1))
    repository.create(_message("m3", "carol", "bob", minutes=2))
    repository.create(_message("m4", "alice", "bob", minutes=3))

    conversation = repository.list_conversation("bob", "alice")
    assert [message.id for message in conversation] == ["m1", "m2", "m4"]
    assert [m.id for m in repository.list_conversation("alice", "bob", limit=2)] == ["m1", "m2"]

    assert [message.id for message in repository.list_inbox("bob")] == ["m4", "m3", "m1"]
    assert [message.id for message in repository.list_sent("alice")] == ["m4", "m1"]


def test_statuses_preceding_follows_lifecycle_order() -> None:
    assert statuses_preceding(MESSAGE_STATUS_SENT) == (MESSAGE_STATUS_SENT,)
    assert statuses_preceding(MESSAGE_STATUS_SEEN) == (
        MESSAGE_STATUS_SENT,
        MESSAGE_STATUS_DELIVERED,
        MESSAGE_STATUS_SEEN,
    )
    with pytest.raises(ValueError):
        statuses_preceding("failed")
