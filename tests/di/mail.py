"""Mock mail providers for testing."""

from dishka import Scope, provide

from margin.adapter.mail import RecordingNotifier
from margin.domain.service import Notifier
from margin.util.di.infrastructure.mail import MailProvider


class MockMailProvider(MailProvider):
    """Mock mail provider recording notifications instead of sending them."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_notifier(self) -> Notifier:
        """Provide recording notifier."""
        return RecordingNotifier()
