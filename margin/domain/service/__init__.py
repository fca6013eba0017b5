"""Domain services."""

from .base import Service
from .comment_cache import CommentCache
from .comment_service import CommentService
from .identity_service import IdentityService
from .jwt_service import JWTService
from .moderation_service import ModerationService, SpamChecker
from .notification_service import (
    Notification,
    NotificationService,
    Notifier,
    NotifyEvent,
)
from .rate_limiter import RateLimiter
from .render_service import (
    GeoLocator,
    MarkdownRenderer,
    RenderService,
    UserAgentParser,
)
from .user_service import UserService

__all__ = [
    "CommentCache",
    "CommentService",
    "GeoLocator",
    "IdentityService",
    "JWTService",
    "MarkdownRenderer",
    "ModerationService",
    "Notification",
    "NotificationService",
    "Notifier",
    "NotifyEvent",
    "RateLimiter",
    "RenderService",
    "Service",
    "SpamChecker",
    "UserAgentParser",
    "UserService",
]
