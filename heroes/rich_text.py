"""
Rendering for the markdown subset produced by the dashboard's content editor.

Only a fixed set of patterns is recognised, and the input is HTML-escaped
before any of them are applied, so editors cannot inject raw markup.
"""

import re

from django.utils.html import escape
from django.utils.safestring import mark_safe

# (pattern, replacement) pairs, applied in order after escaping
MARKDOWN_RULES = [
    (re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.*?)\*"), r"<em>\1</em>"),
    (re.compile(r"^### (.*)$", re.MULTILINE), r'<h3 class="rich-text__h3">\1</h3>'),
    (re.compile(r"^## (.*)$", re.MULTILINE), r'<h2 class="rich-text__h2">\1</h2>'),
    (re.compile(r"^# (.*)$", re.MULTILINE), r'<h1 class="rich-text__h1">\1</h1>'),
    (
        re.compile(r"^&gt; (.*)$", re.MULTILINE),
        r'<blockquote class="rich-text__quote">\1</blockquote>',
    ),
    (re.compile(r"^- (.*)$", re.MULTILINE), r"<li>\1</li>"),
    (re.compile(r"^\d+\. (.*)$", re.MULTILINE), r"<li>\1</li>"),
]

LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

SAFE_URL_SCHEMES = ("http://", "https://", "mailto:", "tel:", "/", "#")


def _render_link(match):
    label, url = match.groups()
    if not url.lower().startswith(SAFE_URL_SCHEMES):
        return label
    return '<a href="%s" target="_blank" rel="noopener noreferrer">%s</a>' % (
        url,
        label,
    )


def render_markdown(text):
    """
    Convert editor markdown to HTML. Returns a safe string.
    """
    if not text:
        return mark_safe("")

    html = escape(text.replace("\r\n", "\n"))
    for pattern, replacement in MARKDOWN_RULES:
        html = pattern.sub(replacement, html)
    html = LINK_RE.sub(_render_link, html)
    html = html.replace("\n", "<br>")

    return mark_safe(html)
