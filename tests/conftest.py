"""Shared fixtures for the realtime delivery test-suite."""

from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Any, Callable

TEST_DB_PATH = Path(tempfile.gettempdir()) / "realtime_delivery_test.db"
TEST_SECRET_KEY = "test-secret"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = TEST_SECRET_KEY

import pytest  # noqa: E402
from jose import jwt  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()


class FakeWebSocket:
    """In-memory stand-in for a websocket transport."""

    def __init__(
        self,
        *,
        fail_on_send: bool = False,
        fail_on_accept: bool = False,
        send_delay: float | None = None,
        on_send: Callable[[dict[str, Any]], None] | None = None,
    ) -> None:
        self.accepted = False
        self.sent: list[dict[str, Any]] = []
        self._fail_on_send = fail_on_send
        self._fail_on_accept = fail_on_accept
        self._send_delay = send_delay
        self._on_send = on_send

    async def accept(self) -> None:
        if self._fail_on_accept:
            raise RuntimeError("handshake failed")
        self.accepted = True

    async def send_json(self, data: Any) -> None:
        if self._send_delay is not None:
            await asyncio.sleep(self._send_delay)
        if self._fail_on_send:
            raise RuntimeError("connection reset by peer")
        self.sent.append(data)
        if self._on_send is not None:
            self._on_send(data)

    def frames(self, event_type: str) -> list[Any]:
        return [frame["data"] for frame in self.sent if frame["type"] == event_type]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fake_websocket() -> type[FakeWebSocket]:
    return FakeWebSocket


@pytest.fixture
def token_for() -> Callable[[str], str]:
    """Return a helper that signs an access token for a user identity."""

    def _token_for(user_id: str) -> str:
        return jwt.encode({"sub": user_id}, TEST_SECRET_KEY, algorithm="HS256")

    return _token_for


@pytest.fixture
def session_factory():
    """Return a session factory bound to a private in-memory database."""

    from app.infrastructure import models  # noqa: F401
    from app.infrastructure.database import Base, build_engine

    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def message_store(session_factory):
    from app.infrastructure.repositories import MessageStore

    return MessageStore(session_factory)


@pytest.fixture
def client():
    """Return a test client bound to a fresh application and database."""

    from fastapi.testclient import TestClient

    from app.infrastructure import database

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
