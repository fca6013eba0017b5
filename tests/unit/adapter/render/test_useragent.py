"""Unit tests for UserAgentsParser."""

from margin.adapter.render import UserAgentsParser

CHROME_ON_WINDOWS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class TestUserAgentsParser:
    def test_parses_browser_and_os(self):
        browser, os_name = UserAgentsParser().parse(CHROME_ON_WINDOWS)

        assert browser.startswith("Chrome 120")
        assert os_name.startswith("Windows")

    def test_unknown_agent_is_blank(self):
        assert UserAgentsParser().parse("definitely-not-a-browser") == ("", "")
