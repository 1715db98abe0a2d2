"""Inline formatting: tokenize escaped text into spans and render them to HTML.

Passes run in a fixed order over an escaped string: images, links, bold,
italic, strikethrough, code, hard breaks. Each pass sees the spans produced by
earlier passes as opaque units, so it can wrap them but never split them.
"""

import re
from typing import Callable

from markshare.core.models import InlineSpan, SpanType
from markshare.core.render.escape import escape_html, sanitize_url


# A span already produced by an earlier pass is flattened to \x02<index>\x03
# while a later pass scans its level.
_SLOT_RE = re.compile("\x02(\\d+)\x03")
_RESERVED = str.maketrans("", "", "\x02\x03")

IMAGE_RE = re.compile(r"!\[([^\]\x02\x03]*)\]\(([^)\x02\x03]+)\)")
LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)\x02\x03]+)\)")
BOLD_ITALIC_RE = re.compile(r"\*\*\*(.+?)\*\*\*", re.DOTALL)
BOLD_STAR_RE = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)
BOLD_UNDERSCORE_RE = re.compile(r"__(.+?)__", re.DOTALL)
ITALIC_STAR_RE = re.compile(r"\*(.+?)\*", re.DOTALL)
ITALIC_UNDERSCORE_RE = re.compile(r"(?<![a-zA-Z0-9])_(.+?)_(?![a-zA-Z0-9])", re.DOTALL)
STRIKE_RE = re.compile(r"~~([^~]+)~~")
CODE_RE = re.compile(r"`([^`]+)`")
HARD_BREAK_RE = re.compile(r" {2,}(?=\n|$)")

_WRAP_TAGS: dict[SpanType, tuple[str, str]] = {
    SpanType.bold:          ("<strong>", "</strong>"),
    SpanType.italic:        ("<em>", "</em>"),
    SpanType.bold_italic:   ("<strong><em>", "</em></strong>"),
    SpanType.strikethrough: ("<del>", "</del>"),
    SpanType.code:          ("<code>", "</code>"),
}


def _unflatten(text: str, slots: list[InlineSpan]) -> list:
    """Turn a flattened string back into a node list of strings and spans."""
    nodes = []
    for i, part in enumerate(_SLOT_RE.split(text)):
        if i % 2:
            nodes.append(slots[int(part)])
        elif part:
            nodes.append(part)
    return nodes


def _rewrite(nodes: list, pattern: re.Pattern, build: Callable) -> list:
    """Apply one pass to a node level and, recursively, to every nested span.

    All matches on the flattened level are collected before any splicing, so
    offsets always refer to the unmodified string.
    """
    slots: list[InlineSpan] = []
    flat = []
    for node in nodes:
        if isinstance(node, str):
            flat.append(node)
            continue
        if node.type is not SpanType.image:
            node.children = _rewrite(node.children, pattern, build)
        flat.append(f"\x02{len(slots)}\x03")
        slots.append(node)
    text = "".join(flat)

    matches = list(pattern.finditer(text))
    if not matches:
        return nodes

    out: list = []
    pos = 0
    for m in matches:
        out.extend(_unflatten(text[pos:m.start()], slots))
        out.extend(build(m, lambda s: _unflatten(s, slots)))
        pos = m.end()
    out.extend(_unflatten(text[pos:], slots))
    return out


def _wrapping(span_type: SpanType) -> Callable:
    def build(m, unflatten):
        return [InlineSpan(span_type, unflatten(m.group(1)))]
    return build


def _image(m, unflatten):
    return [InlineSpan(SpanType.image, [m.group(1)], target=sanitize_url(m.group(2)))]


def _link(m, unflatten):
    return [InlineSpan(SpanType.link, unflatten(m.group(1)), target=sanitize_url(m.group(2)))]


def _line_break(m, unflatten):
    return [InlineSpan(SpanType.line_break, [])]


PASSES: list[tuple[re.Pattern, Callable]] = [
    (IMAGE_RE,             _image),
    (LINK_RE,              _link),
    (BOLD_ITALIC_RE,       _wrapping(SpanType.bold_italic)),
    (BOLD_STAR_RE,         _wrapping(SpanType.bold)),
    (BOLD_UNDERSCORE_RE,   _wrapping(SpanType.bold)),
    (ITALIC_STAR_RE,       _wrapping(SpanType.italic)),
    (ITALIC_UNDERSCORE_RE, _wrapping(SpanType.italic)),
    (STRIKE_RE,            _wrapping(SpanType.strikethrough)),
    (CODE_RE,              _wrapping(SpanType.code)),
    (HARD_BREAK_RE,        _line_break),
]


def tokenize_inline(text: str) -> list:
    """Escape text once and split it into plain strings and InlineSpans."""
    nodes: list = [escape_html(text.translate(_RESERVED))]
    for pattern, build in PASSES:
        nodes = _rewrite(nodes, pattern, build)
    return [n for n in nodes if n != ""]


def render_spans(nodes: list) -> str:
    parts = []
    for node in nodes:
        if isinstance(node, str):
            parts.append(node)
        elif node.type is SpanType.image:
            alt = node.children[0] if node.children else ""
            parts.append(f'<img src="{node.target}" alt="{alt}">')
        elif node.type is SpanType.link:
            parts.append(f'<a href="{node.target}">{render_spans(node.children)}</a>')
        elif node.type is SpanType.line_break:
            parts.append("<br>")
        else:
            open_tag, close_tag = _WRAP_TAGS[node.type]
            parts.append(f"{open_tag}{render_spans(node.children)}{close_tag}")
    return "".join(parts)


def format_inline(text: str) -> str:
    """Convert one line or joined paragraph of inline markdown to HTML."""
    return render_spans(tokenize_inline(text))
