"""Domain layer DI providers."""

from dishka import Scope, provide

from margin.config import (
    AuthSettings,
    CommentSettings,
    MailSettings,
    SiteSettings,
)
from margin.domain.repository import CommentRepository, UserRepository
from margin.domain.service import (
    CommentCache,
    CommentService,
    IdentityService,
    JWTService,
    ModerationService,
    NotificationService,
    Notifier,
    RateLimiter,
    SpamChecker,
    UserService,
)
from margin.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Services built on repositories are REQUEST-scoped to align with the
    repository/session lifecycle. The rate limiter, the comment cache and
    the notification service hold process-wide state and are APP-scoped.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_rate_limiter(self, settings: CommentSettings) -> RateLimiter:
        """Provide the shared rate limiter."""
        return RateLimiter(window_seconds=settings.rate_limit_window)

    @provide(scope=Scope.APP)
    def get_comment_cache(self) -> CommentCache:
        """Provide the shared comment page cache."""
        return CommentCache()

    @provide(scope=Scope.APP)
    def get_notification_service(
        self,
        notifier: Notifier,
        mail_settings: MailSettings,
        site_settings: SiteSettings,
    ) -> NotificationService:
        """Provide notification service (owns in-flight deliveries)."""
        return NotificationService(
            notifier=notifier,
            mail_settings=mail_settings,
            site_settings=site_settings,
        )

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> IdentityService:
        """Provide identity resolution service."""
        return IdentityService(jwt_service=jwt_service, user_repository=user_repository)

    @provide
    def get_moderation_service(
        self, settings: CommentSettings, spam_checker: SpamChecker
    ) -> ModerationService:
        """Provide moderation pipeline."""
        return ModerationService(settings=settings, spam_checker=spam_checker)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository, settings=settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, mail_settings: MailSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, mail_settings=mail_settings)
