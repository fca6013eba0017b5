"""Presentation adapters: markdown, user agents, IP regions."""

from .geo import GeoIP2Locator
from .markdown import SanitizingMarkdownRenderer
from .useragent import UserAgentsParser

__all__ = ["GeoIP2Locator", "SanitizingMarkdownRenderer", "UserAgentsParser"]
