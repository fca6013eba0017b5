"""Mail infrastructure providers."""

from dishka import Scope, provide

from margin.adapter.mail import SmtpNotifier
from margin.config import MailSettings, SiteSettings
from margin.domain.service import Notifier
from margin.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider sending over SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(
        self, mail_settings: MailSettings, site_settings: SiteSettings
    ) -> Notifier:
        """Provide SMTP notifier (a no-op until SMTP credentials are set)."""
        return SmtpNotifier(settings=mail_settings, sender_name=site_settings.name)
