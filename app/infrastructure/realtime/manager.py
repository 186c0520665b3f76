"""Connection management helpers for realtime websockets."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol
from uuid import uuid4

from .registry import ConnectionRegistry

logger = logging.getLogger(__name__)


class PushTransport(Protocol):
    """Subset of :class:`fastapi.WebSocket` used to deliver frames."""

    async def accept(self) -> None: ...

    async def send_json(self, data: Any) -> None: ...


class RealtimeConnectionManager:
    """Own the live websockets of one hub and fan frames out per user.

    Identity bookkeeping is delegated to a :class:`ConnectionRegistry`; this
    class only keeps the transport for each connection id.
    """

    def __init__(
        self,
        registry: ConnectionRegistry | None = None,
        *,
        name: str = "realtime",
        push_timeout: float | None = None,
        max_concurrency: int | None = None,
    ) -> None:
        self._registry = registry or ConnectionRegistry()
        self._connections: dict[str, PushTransport] = {}
        self._name = name
        self._push_timeout = push_timeout
        self._max_concurrency = max_concurrency

    @property
    def registry(self) -> ConnectionRegistry:
        return self._registry

    async def connect(self, websocket: PushTransport, user_id: str | None) -> str:
        """Accept ``websocket`` and register it for ``user_id``.

        Nothing is stored until the handshake has completed, so pushes never
        target a socket that cannot send yet. Anonymous connections are
        accepted but never registered.
        """

        await websocket.accept()
        connection_id = uuid4().hex
        self._connections[connection_id] = websocket
        self._registry.register(connection_id, user_id)

        logger.info(
            "%s connection %s opened for user %s",
            self._name,
            connection_id,
            user_id or "<anonymous>",
        )
        return connection_id

    def disconnect(self, connection_id: str) -> None:
        """Forget ``connection_id``; unknown ids are ignored."""

        transport = self._connections.pop(connection_id, None)
        user_id = self._registry.unregister(connection_id)
        if transport is not None:
            logger.info(
                "%s connection %s closed for user %s",
                self._name,
                connection_id,
                user_id or "<anonymous>",
            )

    def is_connected(self, connection_id: str) -> bool:
        return connection_id in self._connections

    async def send_to_connection(
        self, connection_id: str, event_type: str, payload: Any
    ) -> bool:
        """Push one frame to ``connection_id`` and report whether it was written."""

        connection = self._connections.get(connection_id)
        if connection is None:
            return False

        message = {"type": event_type, "data": payload}
        try:
            if self._push_timeout is None:
                await connection.send_json(message)
            else:
                await asyncio.wait_for(connection.send_json(message), self._push_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Push of %s to %s connection %s timed out after %ss",
                event_type,
                self._name,
                connection_id,
                self._push_timeout,
            )
            return False
        except Exception:
            logger.warning(
                "Push of %s to %s connection %s failed; dropping the connection",
                event_type,
                self._name,
                connection_id,
                exc_info=True,
            )
            self.disconnect(connection_id)
            return False
        return True

    async def send_to_user(self, user_id: str, event_type: str, payload: Any) -> int:
        """Push ``payload`` to every live connection of ``user_id``.

        Returns the number of connections that received the frame. Users
        without live connections are skipped silently.
        """

        connection_ids = self._registry.connections_for(user_id)
        if not connection_ids:
            logger.debug("No live %s connections for user %s", self._name, user_id)
            return 0

        if self._max_concurrency is None:
            results = await asyncio.gather(
                *(
                    self.send_to_connection(connection_id, event_type, payload)
                    for connection_id in connection_ids
                )
            )
        else:
            semaphore = asyncio.Semaphore(self._max_concurrency)

            async def bounded(connection_id: str) -> bool:
                async with semaphore:
                    return await self.send_to_connection(connection_id, event_type, payload)

            results = await asyncio.gather(
                *(bounded(connection_id) for connection_id in connection_ids)
            )
        return sum(1 for delivered in results if delivered)


__all__ = ["PushTransport", "RealtimeConnectionManager"]
