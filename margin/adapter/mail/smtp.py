"""SMTP notifier built on aiosmtplib."""

from email.message import EmailMessage

import aiosmtplib
import logfire

from margin.adapter.error import NotificationError
from margin.config import MailSettings
from margin.domain.service.notification_service import (
    Notification,
    Notifier,
    NotifyEvent,
)
from margin.util.error import ConfigurationError
from margin.util.locales import render

# (host, port) of well-known providers, selected by MAIL__SMTP_SERVICE
SMTP_SERVICES: dict[str, tuple[str, int]] = {
    "qq": ("smtp.qq.com", 465),
    "gmail": ("smtp.gmail.com", 587),
    "126": ("smtp.126.com", 25),
    "163": ("smtp.163.com", 25),
}

_TEMPLATES: dict[NotifyEvent, tuple[str, str]] = {
    NotifyEvent.NEW_COMMENT: ("MAIL_SUBJECT_ADMIN", "MAIL_TEMPLATE_ADMIN"),
    NotifyEvent.REGISTER_USER: ("Registration Confirm Mail", "confirm registration"),
}


def resolve_smtp_server(settings: MailSettings) -> tuple[str, int]:
    """Pick the SMTP host and port.

    A named service wins over an explicit host.

    Raises:
        ConfigurationError: If neither a known service nor a host is set
    """
    if settings.smtp_service:
        server = SMTP_SERVICES.get(settings.smtp_service.lower())
        if server is None:
            raise ConfigurationError(
                f"Unknown SMTP service: {settings.smtp_service}"
            )
        return server
    if not settings.smtp_host:
        raise ConfigurationError("MAIL__SMTP_HOST or MAIL__SMTP_SERVICE must be set")
    return settings.smtp_host, settings.smtp_port or 25


class SmtpNotifier(Notifier):
    """Sends localized HTML notification mails over SMTP."""

    def __init__(self, settings: MailSettings, sender_name: str) -> None:
        self.settings = settings
        self.sender_name = sender_name

    def build_message(self, notification: Notification) -> EmailMessage:
        subject_key, body_key = _TEMPLATES[notification.event]
        message = EmailMessage()
        message["From"] = f"{self.sender_name} <{self.settings.smtp_user}>"
        message["To"] = notification.recipient
        message["Subject"] = render(
            notification.locale, subject_key, **notification.values
        )
        message.set_content(
            render(notification.locale, body_key, **notification.values),
            subtype="html",
        )
        return message

    async def notify(self, notification: Notification) -> None:
        if not self.settings.configured:
            logfire.info(
                "SMTP not configured, notification skipped",
                notify_event=notification.event.value,
            )
            return

        hostname, port = resolve_smtp_server(self.settings)
        message = self.build_message(notification)
        try:
            await aiosmtplib.send(
                message,
                hostname=hostname,
                port=port,
                username=self.settings.smtp_user,
                password=self.settings.smtp_pass,
                use_tls=port == 465,
                start_tls=True if port == 587 else None,
            )
        except aiosmtplib.SMTPException as e:
            logfire.error(
                "SMTP delivery failed",
                hostname=hostname,
                recipient=notification.recipient,
                error=str(e),
            )
            raise NotificationError(f"SMTP delivery failed: {e}")

        logfire.info(
            "Mail sent",
            notify_event=notification.event.value,
            recipient=notification.recipient,
        )


class RecordingNotifier(Notifier):
    """Notifier for testing: keeps every notification instead of sending it."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[Notification] = []

    async def notify(self, notification: Notification) -> None:
        if self.fail:
            raise NotificationError("Mock notifier failure")
        self.sent.append(notification)
