"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from margin.config import (
    AuthSettings,
    CommentSettings,
    MailSettings,
    Settings,
    SiteSettings,
)
from margin.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file
    automatically. Each settings group is provided on its own so services
    depend only on the group they read.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comment

    @provide
    def provide_mail_settings(self, settings: Settings) -> MailSettings:
        return settings.mail

    @provide
    def provide_site_settings(self, settings: Settings) -> SiteSettings:
        return settings.site
