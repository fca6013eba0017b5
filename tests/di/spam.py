"""Mock spam checking providers for testing."""

from dishka import Scope, provide

from margin.adapter.akismet import MockSpamChecker
from margin.domain.service import SpamChecker
from margin.util.di.infrastructure.spam import SpamProvider


class MockSpamProvider(SpamProvider):
    """Mock spam provider; every comment is ham unless a test says otherwise."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_spam_checker(self) -> SpamChecker:
        """Provide mock spam checker."""
        return MockSpamChecker()
