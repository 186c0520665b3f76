"""Integration tests for the message and notification REST endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.infrastructure.repositories import MessageStoreError


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _send(client: TestClient, token: str, recipient_id: str, text: str) -> dict:
    response = client.post(
        "/messages/",
        json={"senderUsername": "someone", "recipientId": recipient_id, "text": text},
        headers=_auth(token),
    )
    assert response.status_code == 201
    return response.json()


def test_message_history_flow(client: TestClient, token_for) -> None:
    """Send messages both ways and read them back through every history view."""

    alice, bob = token_for("A"), token_for("B")

    first = _send(client, alice, "B", "hello bob")
    assert first["senderId"] == "A"
    assert first["recipientId"] == "B"
    assert first["status"] == "sent"
    assert first["createdAt"]
    second = _send(client, bob, "A", "hello alice")
    _send(client, alice, "C", "hello carol")

    conversation = client.get("/messages/conversation/B", headers=_auth(alice))
    assert conversation.status_code == 200
    assert [item["text"] for item in conversation.json()] == ["hello bob", "hello alice"]

    inbox = client.get("/messages/inbox", headers=_auth(bob))
    assert [item["id"] for item in inbox.json()] == [first["id"]]

    sent = client.get("/messages/sent", headers=_auth(alice))
    assert {item["text"] for item in sent.json()} == {"hello bob", "hello carol"}

    fetched = client.get(f"/messages/{second['id']}", headers=_auth(alice))
    assert fetched.status_code == 200
    assert fetched.json()["text"] == "hello alice"

    hidden = client.get(f"/messages/{second['id']}", headers=_auth(token_for("C")))
    assert hidden.status_code == 404


def test_send_message_pushes_to_connected_recipient(client: TestClient, token_for) -> None:
    with client.websocket_connect(f"/hubs/chat?access_token={token_for('B')}") as bob:
        created = _send(client, token_for("A"), "B", "ping from rest")

        frame = bob.receive_json()
        assert frame["type"] == "ReceiveMessage"
        assert frame["data"]["id"] == created["id"]


def test_mark_seen_is_reserved_for_the_recipient(client: TestClient, token_for) -> None:
    created = _send(client, token_for("A"), "B", "read me")

    by_sender = client.post(f"/messages/{created['id']}/seen", headers=_auth(token_for("A")))
    assert by_sender.status_code == 404

    with client.websocket_connect(f"/hubs/chat?access_token={token_for('A')}") as alice:
        response = client.post(f"/messages/{created['id']}/seen", headers=_auth(token_for("B")))
        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "status": "seen"}
        assert alice.receive_json() == {"type": "MessageSeen", "data": created["id"]}

    missing = client.post("/messages/unknown/seen", headers=_auth(token_for("B")))
    assert missing.status_code == 404


def test_message_endpoints_require_authentication(client: TestClient, token_for) -> None:
    assert client.get("/messages/inbox").status_code == 401
    assert client.get("/messages/inbox", headers=_auth("garbage")).status_code == 401
    response = client.post(
        "/messages/", json={"senderUsername": "x", "recipientId": "B", "text": "hi"}
    )
    assert response.status_code == 401


def test_send_message_rejects_blank_fields(client: TestClient, token_for) -> None:
    response = client.post(
        "/messages/",
        json={"senderUsername": "alice", "recipientId": "B", "text": ""},
        headers=_auth(token_for("A")),
    )

    assert response.status_code == 422


def test_send_notification_endpoint(client: TestClient, token_for) -> None:
    headers = _auth(token_for("admin"))

    missing_user = client.post(
        "/notifications/send", json={"title": "t", "message": "m"}, headers=headers
    )
    assert missing_user.status_code == 422

    too_long = client.post(
        "/notifications/send",
        json={"userId": "u1", "title": "x" * 201, "message": "m"},
        headers=headers,
    )
    assert too_long.status_code == 422

    with client.websocket_connect(f"/hubs/notifications?access_token={token_for('u1')}") as target:
        response = client.post(
            "/notifications/send",
            json={"userId": "u1", "title": "Heads up", "message": "Deploy at noon", "type": "info"},
            headers=headers,
        )
        assert response.status_code == 202
        body = response.json()
        assert body["title"] == "Heads up"
        assert body["referenceId"] is None

        frame = target.receive_json()
        assert frame["type"] == "ReceiveNotification"
        assert frame["data"]["message"] == "Deploy at noon"


class UnavailableStore:
    async def get(self, message_id):
        raise MessageStoreError("The message store is unavailable")

    async def list_inbox(self, user_id, *, limit=None):
        raise MessageStoreError("The message store is unavailable")


def test_history_reports_an_unavailable_store(client: TestClient, token_for) -> None:
    client.app.state.message_store = UnavailableStore()
    headers = _auth(token_for("B"))

    inbox = client.get("/messages/inbox", headers=headers)
    single = client.get("/messages/m1", headers=headers)

    assert inbox.status_code == single.status_code == 503
    assert inbox.json()["detail"] == "The message store is unavailable"
