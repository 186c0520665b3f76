import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.application.use_cases.realtime import ChatDeliveryOrchestrator, NotificationChannel
from app.config import get_settings
from app.infrastructure.database import engine, initialize_database
from app.infrastructure.realtime import ConnectionRegistry, RealtimeConnectionManager
from app.infrastructure.repositories import MessageStore
from app.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on startup and release the engine on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def configure_realtime(app: FastAPI) -> None:
    """Build the per-process connection registries and delivery services.

    Each hub owns one registry; both live on ``app.state`` for the lifetime of
    the application.
    """

    settings = get_settings()
    chat_connections = RealtimeConnectionManager(
        ConnectionRegistry(),
        name="chat",
        push_timeout=settings.realtime_push_timeout_seconds,
        max_concurrency=settings.realtime_max_fanout_concurrency,
    )
    notification_connections = RealtimeConnectionManager(
        ConnectionRegistry(),
        name="notification",
        push_timeout=settings.realtime_push_timeout_seconds,
        max_concurrency=settings.realtime_max_fanout_concurrency,
    )
    message_store = MessageStore()

    app.state.chat_connections = chat_connections
    app.state.notification_connections = notification_connections
    app.state.message_store = message_store
    app.state.chat_orchestrator = ChatDeliveryOrchestrator(message_store, chat_connections)
    app.state.notification_channel = NotificationChannel(notification_connections)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    logging.getLogger("app").setLevel(settings.log_level.upper())

    app = FastAPI(title="Realtime delivery API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    configure_realtime(app)
    register_routes(app)
    return app


app = create_app()
