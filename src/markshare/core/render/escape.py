"""HTML escaping and link/image URL sanitization"""

from markdown_it.common.utils import escapeHtml


SAFE_URL_PREFIXES = ("http://", "https://", "mailto:", "data:", "#")


def escape_html(text: str) -> str:
    """Escape &, <, > and double quotes for element text and attribute values."""
    return escapeHtml(text)


def sanitize_url(url: str) -> str:
    """Return url unchanged if its scheme is allowed, else '#'.

    Relative paths and bare fragments (no ':' at all) are allowed; javascript:,
    vbscript:, file: and any other scheme are not.
    """
    inspected = url.strip().lower()
    if inspected.startswith(SAFE_URL_PREFIXES) or ":" not in inspected:
        return url
    return "#"
