"""Fire-and-forget notifications (new comments, account verification)."""

import asyncio
from abc import ABC, abstractmethod
from enum import Enum

import logfire

from margin.config import MailSettings, SiteSettings
from margin.domain.model import Comment, User
from margin.domain.value.common import ValueObject

from .base import Service


class NotifyEvent(str, Enum):
    NEW_COMMENT = "new_comment"
    REGISTER_USER = "register_user"


class Notification(ValueObject):
    """A message to deliver.

    ``values`` fills the placeholders of the event's localized templates.
    """

    event: NotifyEvent
    recipient: str
    values: dict[str, str]
    locale: str | None = None


class Notifier(ABC):
    """Abstract notification transport."""

    @abstractmethod
    async def notify(self, notification: Notification) -> None:
        """Deliver a notification.

        Raises:
            NotificationError: If delivery fails
        """
        pass


class NotificationService(Service):
    """Builds notifications and launches their delivery as detached tasks.

    Callers never await delivery and never see its failures; failures are
    logged. Pending tasks are held by strong reference until they finish.
    """

    def __init__(
        self,
        notifier: Notifier,
        mail_settings: MailSettings,
        site_settings: SiteSettings,
    ) -> None:
        self.notifier = notifier
        self.mail_settings = mail_settings
        self.site_settings = site_settings
        self._pending: set[asyncio.Task] = set()

    def notify_new_comment(
        self, comment: Comment, comment_html: str, locale: str | None = None
    ) -> asyncio.Task | None:
        """Tell the site owner about a new comment."""
        recipient = self.mail_settings.author_email
        if not recipient or self.mail_settings.disable_author_notify:
            return None

        site_url = self.site_settings.url.rstrip("/")
        return self.dispatch(
            Notification(
                event=NotifyEvent.NEW_COMMENT,
                recipient=recipient,
                locale=locale,
                values={
                    "site_name": self.site_settings.name,
                    "site_url": site_url,
                    "nick": comment.nick or "",
                    "comment": comment_html,
                    "post_url": f"{site_url}{comment.url}#{comment.id}",
                },
            )
        )

    def notify_registration(
        self, user: User, confirm_url: str, locale: str | None = None
    ) -> asyncio.Task | None:
        """Send the account confirmation link."""
        return self.dispatch(
            Notification(
                event=NotifyEvent.REGISTER_USER,
                recipient=user.email,
                locale=locale,
                values={"name": self.site_settings.name, "url": confirm_url},
            )
        )

    def dispatch(self, notification: Notification) -> asyncio.Task:
        """Launch delivery without waiting for it."""
        task = asyncio.create_task(
            self._deliver(notification), name=f"notify-{notification.event.value}"
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        logfire.info(
            "Notification dispatched",
            notify_event=notification.event.value,
            recipient=notification.recipient,
        )
        return task

    async def drain(self) -> None:
        """Wait for every in-flight delivery (shutdown and tests)."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def _deliver(self, notification: Notification) -> None:
        try:
            await self.notifier.notify(notification)
        except Exception as e:
            logfire.error(
                "Notification delivery failed",
                notify_event=notification.event.value,
                recipient=notification.recipient,
                error=str(e),
                error_type=type(e).__name__,
            )
