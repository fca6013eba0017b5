"""Markdown rendering with HTML sanitization."""

import markdown
import nh3

from margin.domain.service.render_service import MarkdownRenderer

_EXTENSIONS = ["fenced_code", "tables", "nl2br", "sane_lists"]


class SanitizingMarkdownRenderer(MarkdownRenderer):
    """Renders with python-markdown, then strips unsafe HTML with nh3.

    Raw HTML in a comment survives only if nh3's allowlist accepts it, so
    scripts, event handlers and javascript: links never reach clients.
    """

    def render(self, text: str) -> str:
        html = markdown.markdown(text, extensions=_EXTENSIONS)
        return nh3.clean(html, link_rel="noopener noreferrer nofollow")
