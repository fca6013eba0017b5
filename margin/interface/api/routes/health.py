"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from margin.config import Settings
from margin.domain.service import CommentCache, NotificationService

router = APIRouter(prefix="/api", tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    cache: dict[str, int]
    pending_notifications: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    comment_cache: FromDishka[CommentCache],
    notification_service: FromDishka[NotificationService],
) -> HealthResponse:
    """Basic health check endpoint, with in-process cache and mail queue state."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        cache=comment_cache.stats(),
        pending_notifications=notification_service.pending,
    )
