"""Unit tests for RenderService."""

import hashlib

from margin.config import CommentSettings
from margin.domain.service import GeoLocator, RenderService
from margin.domain.service.render_service import MarkdownRenderer, UserAgentParser


class EchoRenderer(MarkdownRenderer):
    def render(self, markdown: str) -> str:
        return f"<p>{markdown}</p>"


class FixedParser(UserAgentParser):
    def parse(self, user_agent: str) -> tuple[str, str]:
        return "Firefox 120.0", "Linux"


class FixedLocator(GeoLocator):
    def lookup(self, ip: str) -> str | None:
        return "Bavaria" if ip == "1.2.3.4" else None


def make_service(**settings) -> RenderService:
    return RenderService(
        settings=CommentSettings(**settings),
        markdown_renderer=EchoRenderer(),
        user_agent_parser=FixedParser(),
        geo_locator=FixedLocator(),
    )


class TestRenderService:
    def test_render_content_delegates(self):
        assert make_service().render_content("hi") == "<p>hi</p>"

    def test_browser_and_os(self):
        assert make_service().browser_and_os("Mozilla/5.0") == ("Firefox 120.0", "Linux")

    def test_browser_and_os_blank_when_disabled(self):
        service = make_service(disable_useragent=True)

        assert service.browser_and_os("Mozilla/5.0") == ("", "")

    def test_browser_and_os_blank_without_user_agent(self):
        assert make_service().browser_and_os(None) == ("", "")

    def test_region(self):
        service = make_service()

        assert service.region("1.2.3.4") == "Bavaria"
        assert service.region("8.8.8.8") is None
        assert service.region(None) is None

    def test_region_blank_when_disabled(self):
        assert make_service(disable_region=True).region("1.2.3.4") == ""

    def test_region_none_without_locator(self):
        service = RenderService(
            settings=CommentSettings(),
            markdown_renderer=EchoRenderer(),
            user_agent_parser=FixedParser(),
        )

        assert service.region("1.2.3.4") is None


class TestAvatar:
    def test_gravatar_style_hash_of_normalized_mail(self):
        service = make_service(avatar_url="https://avatar.test/")
        digest = hashlib.md5(b"bob@example.com").hexdigest()

        assert service.avatar("  Bob@Example.com ") == f"https://avatar.test/{digest}"

    def test_qq_numeric_mail_uses_qq_avatar(self):
        assert make_service().avatar("12345@qq.com") == (
            "https://q1.qlogo.cn/g?b=qq&nk=12345&s=100"
        )

    def test_missing_mail_hashes_empty_string(self):
        digest = hashlib.md5(b"").hexdigest()

        assert make_service().avatar(None).endswith(digest)
