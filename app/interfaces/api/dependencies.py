"""FastAPI dependency utilities."""

from typing import Any

from fastapi import Depends, HTTPException, Request, WebSocket, status
from fastapi.security import OAuth2PasswordBearer

from app.application.use_cases.realtime import ChatDeliveryOrchestrator, NotificationChannel
from app.domain.entities import DeliveryOutcome, ErrorKind
from app.infrastructure.repositories import MessageStore
from app.infrastructure.security import resolve_identity

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")

_FAILURE_STATUS = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PERSISTENCE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.DELIVERY: status.HTTP_502_BAD_GATEWAY,
}


def get_current_identity(token: str = Depends(oauth2_scheme)) -> str:
    """Return the user identity carried by the bearer token."""

    try:
        return resolve_identity(token)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def websocket_identity(websocket: WebSocket) -> str | None:
    """Return the identity of a websocket client, or ``None`` when anonymous.

    Browsers cannot set headers on websocket handshakes, so the token travels
    in the ``access_token`` (or ``token``) query parameter. A token that does
    not validate raises :class:`ValueError`.
    """

    token = websocket.query_params.get("access_token") or websocket.query_params.get("token")
    if not token:
        return None
    return resolve_identity(token)


def get_message_store(request: Request) -> MessageStore:
    return request.app.state.message_store


def get_chat_orchestrator(request: Request) -> ChatDeliveryOrchestrator:
    return request.app.state.chat_orchestrator


def get_notification_channel(request: Request) -> NotificationChannel:
    return request.app.state.notification_channel


def raise_for_failure(outcome: DeliveryOutcome[Any]) -> None:
    """Translate a failed outcome into the matching HTTP error."""

    if outcome.error is None:
        return
    headers = None
    if outcome.error.kind is ErrorKind.UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    raise HTTPException(
        status_code=_FAILURE_STATUS[outcome.error.kind],
        detail=outcome.error.detail,
        headers=headers,
    )
