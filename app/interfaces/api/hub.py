"""Websocket session loop shared by the realtime hubs."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect, status
from pydantic import ValidationError

from app.domain.entities import DeliveryOutcome, ErrorKind
from app.infrastructure.realtime import RealtimeConnectionManager

from .dependencies import websocket_identity
from .schemas import HubFrame

logger = logging.getLogger(__name__)

ERROR_EVENT = "Error"
PING_EVENT = "ping"
PONG_EVENT = "pong"


@dataclass(frozen=True)
class HubCall:
    """Caller context handed to every hub operation."""

    connection_id: str
    user_id: str | None


HubHandler = Callable[[HubCall, dict[str, Any]], Awaitable[DeliveryOutcome[Any]]]


async def serve_hub(
    websocket: WebSocket,
    manager: RealtimeConnectionManager,
    handlers: Mapping[str, HubHandler],
) -> None:
    """Run one hub connection until the client goes away.

    Frames are ``{"type": ..., "data": {...}}`` objects dispatched to
    ``handlers`` by type. Failures are answered with an ``Error`` frame to the
    calling connection only. The connection is always unregistered on exit.
    """

    try:
        user_id = websocket_identity(websocket)
    except ValueError:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    connection_id = await manager.connect(websocket, user_id)
    call = HubCall(connection_id=connection_id, user_id=user_id)
    try:
        while True:
            try:
                raw = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except ValueError:
                await _send_error(
                    manager, call, None, ErrorKind.VALIDATION, "Frames must be valid JSON"
                )
                continue

            try:
                frame = HubFrame.model_validate(raw)
            except ValidationError:
                await _send_error(
                    manager,
                    call,
                    None,
                    ErrorKind.VALIDATION,
                    "Frames must be objects with a 'type' and optional 'data'",
                )
                continue

            if frame.type == PING_EVENT:
                await manager.send_to_connection(connection_id, PONG_EVENT, None)
                continue

            handler = handlers.get(frame.type)
            if handler is None:
                await _send_error(
                    manager,
                    call,
                    frame.type,
                    ErrorKind.VALIDATION,
                    f"Unknown operation '{frame.type}'",
                )
                continue

            try:
                outcome = await handler(call, frame.data or {})
            except ValidationError as exc:
                await _send_error(manager, call, frame.type, ErrorKind.VALIDATION, _summary(exc))
                continue
            except Exception:
                logger.exception(
                    "Hub operation %s failed for connection %s", frame.type, connection_id
                )
                await _send_error(
                    manager, call, frame.type, ErrorKind.DELIVERY, "The operation could not be completed"
                )
                continue

            if outcome.error is not None:
                await _send_error(
                    manager, call, frame.type, outcome.error.kind, outcome.error.detail
                )
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(connection_id)


async def _send_error(
    manager: RealtimeConnectionManager,
    call: HubCall,
    operation: str | None,
    kind: ErrorKind,
    detail: str,
) -> None:
    await manager.send_to_connection(
        call.connection_id,
        ERROR_EVENT,
        {"operation": operation, "kind": kind.value, "detail": detail},
    )


def _summary(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


__all__ = ["HubCall", "HubHandler", "serve_hub"]
