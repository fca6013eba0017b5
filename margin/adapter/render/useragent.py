"""User-agent parsing with the user-agents package."""

from user_agents import parse

from margin.domain.service.render_service import UserAgentParser


def _label(family: str, version: str) -> str:
    if family == "Other":
        return ""
    return f"{family} {version}".strip()


class UserAgentsParser(UserAgentParser):
    def parse(self, user_agent: str) -> tuple[str, str]:
        ua = parse(user_agent)
        return (
            _label(ua.browser.family, ua.browser.version_string),
            _label(ua.os.family, ua.os.version_string),
        )
