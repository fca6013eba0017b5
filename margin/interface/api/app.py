"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from margin.config import Settings
from margin.domain.service import NotificationService
from margin.interface.api.response import register_exception_handlers
from margin.interface.api.routes import comments, health, users
from margin.util.di.container import create_container, setup_di
from margin.util.logging import get_logger
from margin.util.observability import instrument_fastapi, instrument_httpx

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    container: AsyncContainer = app.state.dishka_container
    notification_service = await container.get(NotificationService)
    if notification_service.pending:
        logger.info("Waiting for %d notifications", notification_service.pending)
    await notification_service.drain()
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production start_app.py handles this.

    Args:
        container: DI container, defaults to the production container
    """
    settings = Settings()

    # Akismet calls go through httpx
    instrument_httpx()

    app_instance = FastAPI(
        title="Margin API",
        description="Threaded page comments with moderation, compatible with Waline clients",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials="*" not in settings.cors_origin_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(users.router)

    return app_instance
