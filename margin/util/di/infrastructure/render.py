"""Presentation providers (markdown, user agents, IP regions)."""

from dishka import Scope, provide

from margin.adapter.render import (
    GeoIP2Locator,
    SanitizingMarkdownRenderer,
    UserAgentsParser,
)
from margin.config import CommentSettings
from margin.domain.service import MarkdownRenderer, RenderService, UserAgentParser
from margin.util.di.base import ProviderBase


class ProdRenderProvider(ProviderBase):
    """Render provider - concrete, no mocks needed (all work is local)."""

    scope = Scope.APP

    @provide
    def get_markdown_renderer(self) -> MarkdownRenderer:
        return SanitizingMarkdownRenderer()

    @provide
    def get_user_agent_parser(self) -> UserAgentParser:
        return UserAgentsParser()

    @provide
    def get_render_service(
        self,
        settings: CommentSettings,
        markdown_renderer: MarkdownRenderer,
        user_agent_parser: UserAgentParser,
    ) -> RenderService:
        """Provide render service; region lookup only with a GeoIP database.

        Raises:
            ConfigurationError: If the configured GeoIP database cannot be opened
        """
        geo_locator = None
        if settings.ip_db_path and not settings.disable_region:
            geo_locator = GeoIP2Locator(settings.ip_db_path)
        return RenderService(
            settings=settings,
            markdown_renderer=markdown_renderer,
            user_agent_parser=user_agent_parser,
            geo_locator=geo_locator,
        )
