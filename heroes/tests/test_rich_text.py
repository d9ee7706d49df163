from django.test import SimpleTestCase

from heroes.rich_text import render_markdown


class TestRenderMarkdown(SimpleTestCase):
    def test_empty(self):
        self.assertEqual(render_markdown(""), "")
        self.assertEqual(render_markdown(None), "")

    def test_inline_formatting(self):
        self.assertEqual(
            render_markdown("**bold** and *italic*"),
            "<strong>bold</strong> and <em>italic</em>",
        )

    def test_headings(self):
        self.assertEqual(
            render_markdown("# One\n## Two\n### Three"),
            '<h1 class="rich-text__h1">One</h1><br>'
            '<h2 class="rich-text__h2">Two</h2><br>'
            '<h3 class="rich-text__h3">Three</h3>',
        )

    def test_quote_and_lists(self):
        self.assertEqual(
            render_markdown("> Quote\n- Item\n1. First"),
            '<blockquote class="rich-text__quote">Quote</blockquote><br>'
            "<li>Item</li><br><li>First</li>",
        )

    def test_links(self):
        self.assertEqual(
            render_markdown("[Donate](https://example.com/donate)"),
            '<a href="https://example.com/donate" target="_blank" '
            'rel="noopener noreferrer">Donate</a>',
        )

    def test_unsafe_link_scheme_dropped(self):
        self.assertEqual(render_markdown("[Click](javascript:void)"), "Click")

    def test_html_is_escaped(self):
        self.assertEqual(
            render_markdown("<script>alert('x')</script>"),
            "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;",
        )

    def test_windows_line_endings(self):
        self.assertEqual(render_markdown("a\r\nb"), "a<br>b")
