from fastapi import FastAPI

from .hubs import router as hubs_router
from .messages import router as messages_router
from .notifications import router as notifications_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(hubs_router)
    app.include_router(messages_router)
    app.include_router(notifications_router)
