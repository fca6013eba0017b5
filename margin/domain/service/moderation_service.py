"""Moderation pipeline deciding a new comment's initial status."""

from abc import ABC, abstractmethod

import logfire

from margin.config import CommentSettings
from margin.domain.model import Actor
from margin.domain.value import CommentStatus, SpamVerdict

from .base import Service


class SpamChecker(ABC):
    """Abstract spam checking service.

    Implementations raise on transport or protocol failure; they never
    guess a verdict.
    """

    @abstractmethod
    async def check(
        self,
        author: str | None,
        email: str | None,
        ip: str | None,
        content: str,
    ) -> SpamVerdict:
        """Classify a comment as ham or spam.

        Args:
            author: Nickname given by the commenter
            email: Mail given by the commenter
            ip: Client IP address
            content: Raw comment content

        Returns:
            The checker's verdict
        """
        pass


class ModerationService(Service):
    """Domain service computing creation-time comment status.

    Precedence, first match wins: administrator authorship (approved),
    audit mode (waiting), forbidden word (spam), spam checker verdict.
    """

    def __init__(self, settings: CommentSettings, spam_checker: SpamChecker) -> None:
        """Initialize moderation service.

        Args:
            settings: Comment settings (audit mode, forbidden words)
            spam_checker: External spam checking collaborator
        """
        self.settings = settings
        self.spam_checker = spam_checker

    def find_forbidden_word(self, content: str) -> str | None:
        """Return the first configured forbidden word found in ``content``."""
        for word in self.settings.forbidden_word_list:
            if word in content:
                return word
        return None

    async def decide(
        self,
        actor: Actor,
        nick: str | None,
        mail: str | None,
        ip: str | None,
        content: str,
    ) -> CommentStatus:
        """Decide the initial status of a new comment.

        Raises:
            Whatever the spam checker raises; failures are never mapped to
            a status.
        """
        with logfire.span("moderation_service.decide", ip=ip, actor=actor.kind.value):
            if actor.is_admin:
                return CommentStatus.APPROVED

            if self.settings.audit:
                logfire.info("Comment held for audit", ip=ip)
                return CommentStatus.WAITING

            word = self.find_forbidden_word(content)
            if word is not None:
                logfire.info("Comment contains forbidden word", ip=ip, word=word)
                return CommentStatus.SPAM

            verdict = await self.spam_checker.check(nick, mail, ip, content)
            logfire.info("Spam check finished", ip=ip, verdict=verdict.value)
            if verdict is SpamVerdict.HAM:
                return CommentStatus.APPROVED
            return CommentStatus.SPAM
