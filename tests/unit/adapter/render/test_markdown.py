"""Unit tests for SanitizingMarkdownRenderer."""

from margin.adapter.render import SanitizingMarkdownRenderer


class TestSanitizingMarkdownRenderer:
    def setup_method(self):
        self.renderer = SanitizingMarkdownRenderer()

    def test_renders_markdown(self):
        html = self.renderer.render("**bold** and `code`")

        assert "<strong>bold</strong>" in html
        assert "<code>code</code>" in html

    def test_fenced_code_block(self):
        html = self.renderer.render("```\nprint(1)\n```")

        assert "<pre>" in html
        assert "print(1)" in html

    def test_strips_script_tags(self):
        html = self.renderer.render("hello <script>alert(1)</script>")

        assert "<script" not in html
        assert "hello" in html

    def test_strips_event_handlers(self):
        html = self.renderer.render('<img src="x.png" onerror="alert(1)">')

        assert "onerror" not in html

    def test_strips_javascript_links(self):
        html = self.renderer.render("[click](javascript:alert(1))")

        assert "javascript:" not in html

    def test_links_get_safe_rel(self):
        html = self.renderer.render("[site](https://example.com)")

        assert 'href="https://example.com"' in html
        assert "nofollow" in html
