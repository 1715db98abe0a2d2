"""Unit tests for core/render/escape.py"""

import pytest

from markshare.core.render.escape import escape_html, sanitize_url


def test_escape_html_special_characters():
    """&, <, > and double quotes are replaced by entities."""
    assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"


def test_escape_html_plain_text_unchanged():
    """Text without special characters passes through."""
    assert escape_html("plain text, it's fine") == "plain text, it's fine"


@pytest.mark.parametrize("url", [
    "https://example.com",
    "http://example.com/a?b=c",
    "mailto:someone@example.com",
    "data:image/png;base64,AAAA",
    "#section",
    "images/photo.png",
    "../relative/page.html",
    "HTTPS://EXAMPLE.COM",
])
def test_sanitize_url_allows_safe_urls(url):
    """Allowed schemes and scheme-less paths are returned unchanged."""
    assert sanitize_url(url) == url


@pytest.mark.parametrize("url", [
    "javascript:alert(1)",
    "  JAVASCRIPT:alert(1)",
    "vbscript:msgbox(1)",
    "file:///etc/passwd",
    "ftp://example.com",
])
def test_sanitize_url_blocks_other_schemes(url):
    """Any other scheme is replaced by '#'."""
    assert sanitize_url(url) == "#"
