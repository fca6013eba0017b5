"""Spam checking infrastructure providers."""

from dishka import Scope, provide
import logfire

from margin.adapter.akismet import AkismetSpamChecker, DisabledSpamChecker
from margin.config import Settings
from margin.domain.service import SpamChecker
from margin.util.di.base import ProviderBase


class SpamProvider(ProviderBase):
    """Spam checker component base."""

    __mock_component__ = "spam"


class ProdSpamProvider(SpamProvider):
    """Production spam checker: Akismet when a key is configured."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_spam_checker(self, settings: Settings) -> SpamChecker:
        if not settings.spam.enabled:
            logfire.info("Akismet key not set, spam checking disabled")
            return DisabledSpamChecker()
        return AkismetSpamChecker(
            api_key=settings.spam.akismet_key,
            blog_url=settings.site.url,
            timeout=settings.spam.timeout_seconds,
        )
