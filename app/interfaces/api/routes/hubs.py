"""Websocket hubs for chat messages and notifications."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, WebSocket

from app.application.use_cases.realtime import ChatDeliveryOrchestrator, NotificationChannel
from app.domain.entities import DeliveryOutcome, ErrorKind
from app.interfaces.api.hub import HubCall, serve_hub
from app.interfaces.api.schemas import (
    MarkAsSeenArguments,
    MarkNotificationAsReadArguments,
    SendMessageArguments,
    SendNotificationArguments,
)

router = APIRouter(prefix="/hubs", tags=["realtime"])


@router.websocket("/chat")
async def chat_hub(websocket: WebSocket) -> None:
    """Send messages and seen receipts between users."""

    orchestrator: ChatDeliveryOrchestrator = websocket.app.state.chat_orchestrator

    async def send_message(call: HubCall, data: dict[str, Any]) -> DeliveryOutcome[Any]:
        if call.user_id is None:
            return DeliveryOutcome.failure(ErrorKind.UNAUTHORIZED, "User not authenticated")
        args = SendMessageArguments.model_validate(data)
        if args.sender_id and args.sender_id != call.user_id:
            return DeliveryOutcome.failure(
                ErrorKind.UNAUTHORIZED, "senderId does not match the authenticated user"
            )
        return await orchestrator.send_message(
            args.sender_id, args.sender_username, args.recipient_id, args.text
        )

    async def mark_as_seen(call: HubCall, data: dict[str, Any]) -> DeliveryOutcome[Any]:
        if call.user_id is None:
            return DeliveryOutcome.failure(ErrorKind.UNAUTHORIZED, "User not authenticated")
        args = MarkAsSeenArguments.model_validate(data)
        return await orchestrator.mark_as_seen(
            args.message_id, args.original_sender_id, reader_id=call.user_id
        )

    await serve_hub(
        websocket,
        websocket.app.state.chat_connections,
        {"SendMessage": send_message, "MarkAsSeen": mark_as_seen},
    )


@router.websocket("/notifications")
async def notification_hub(websocket: WebSocket) -> None:
    """Push notifications and echo read receipts."""

    channel: NotificationChannel = websocket.app.state.notification_channel

    async def send_notification(call: HubCall, data: dict[str, Any]) -> DeliveryOutcome[Any]:
        args = SendNotificationArguments.model_validate(data)
        return await channel.send_notification(
            args.user_id, args.title, args.message, args.type, args.reference_id
        )

    async def mark_as_read(call: HubCall, data: dict[str, Any]) -> DeliveryOutcome[Any]:
        args = MarkNotificationAsReadArguments.model_validate(data)
        return await channel.mark_notification_as_read(
            call.user_id, call.connection_id, args.notification_id
        )

    await serve_hub(
        websocket,
        websocket.app.state.notification_connections,
        {"SendNotification": send_notification, "MarkNotificationAsRead": mark_as_read},
    )
