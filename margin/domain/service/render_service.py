"""Presentation fields derived from a stored comment."""

import hashlib
import re
from abc import ABC, abstractmethod

from margin.config import CommentSettings

from .base import Service

_QQ_MAIL = re.compile(r"^(\d+)@qq\.com$")


class MarkdownRenderer(ABC):
    """Turns raw comment markdown into sanitized HTML."""

    @abstractmethod
    def render(self, markdown: str) -> str:
        pass


class UserAgentParser(ABC):
    """Extracts display browser and OS names from a user-agent string."""

    @abstractmethod
    def parse(self, user_agent: str) -> tuple[str, str]:
        pass


class GeoLocator(ABC):
    """Looks up a display region for an IP address."""

    @abstractmethod
    def lookup(self, ip: str) -> str | None:
        pass


class RenderService(Service):
    """Domain service applying presentation switches to collaborators."""

    def __init__(
        self,
        settings: CommentSettings,
        markdown_renderer: MarkdownRenderer,
        user_agent_parser: UserAgentParser,
        geo_locator: GeoLocator | None = None,
    ) -> None:
        """Initialize render service.

        Args:
            settings: Comment settings (privacy switches, avatar base URL)
            markdown_renderer: Markdown renderer and sanitizer
            user_agent_parser: User-agent parser
            geo_locator: Region lookup, None when no database is configured
        """
        self.settings = settings
        self.markdown_renderer = markdown_renderer
        self.user_agent_parser = user_agent_parser
        self.geo_locator = geo_locator

    def render_content(self, raw: str) -> str:
        return self.markdown_renderer.render(raw)

    def browser_and_os(self, user_agent: str | None) -> tuple[str, str]:
        """Browser and OS names, empty when disabled or unknown."""
        if self.settings.disable_useragent or not user_agent:
            return "", ""
        return self.user_agent_parser.parse(user_agent)

    def region(self, ip: str | None) -> str | None:
        """Region for ``ip``.

        Returns an empty string when region display is disabled and None
        when there is nothing to look up with.
        """
        if self.settings.disable_region:
            return ""
        if not ip or self.geo_locator is None:
            return None
        return self.geo_locator.lookup(ip)

    def avatar(self, mail: str | None) -> str:
        """Avatar URL for a mail address.

        QQ numeric addresses use the QQ avatar service; everything else is
        a Gravatar-compatible hash URL.
        """
        normalized = (mail or "").strip().lower()
        match = _QQ_MAIL.match(normalized)
        if match:
            return f"https://q1.qlogo.cn/g?b=qq&nk={match.group(1)}&s=100"
        digest = hashlib.md5(normalized.encode("utf-8")).hexdigest()
        return f"{self.settings.avatar_url}{digest}"
