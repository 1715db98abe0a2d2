"""Pasted rich text -> markdown conversion (best effort, intentionally lossy)"""

import re
from typing import Sequence, Union

from markshare.core.models import RichTextRun
from markshare.core.paste.runs import html_to_runs


OBJECT_REPLACEMENT = "\ufffc"
DASH_RE = re.compile("[\u2010-\u2015\u2212\u2e3a\u2e3b\ufe58\ufe63\uff0d]")
BULLET_RE = re.compile("(^|\\n)([ \\t]*)[\u2022\u25e6\u2023\u25aa\u25b8\u25ba\u2219][ \\t]*")
BLANK_LINES_RE = re.compile(r"\n{3,}")
# "intro 1. first 2. second" -> each marker on its own line; a '*' only
# counts as preceding content when whitespace follows it ("**intro** 1.")
INLINE_NUMBER_RE = re.compile(r"(?:([^\n\d*])|(\*)(?=[ \t]))[ \t]*((?:\*\*)?\d+\.(?:\*\*)?)[ \t]+")
HTML_TAG_RE = re.compile(r"<(?:[a-zA-Z][a-zA-Z0-9]*)(?:\s[^>]*)?/?>")


def _wrap_run(run: RichTextRun) -> str:
    text = run.text
    trimmed = text.strip()
    if not trimmed or not (run.is_bold or run.is_italic):
        return text

    leading = text[:len(text) - len(text.lstrip())]
    trailing = text[len(text.rstrip()):]
    if run.is_bold and run.is_italic:
        marker = "***"
    elif run.is_bold:
        marker = "**"
    else:
        marker = "*"
    return f"{leading}{marker}{trimmed}{marker}{trailing}"


def normalize_plain_text(text: str) -> str:
    """Strip paste junk, normalise dashes and bullet glyphs, squeeze blank lines."""
    text = text.replace(OBJECT_REPLACEMENT, "")
    text = DASH_RE.sub("-", text)
    text = BULLET_RE.sub(r"\1\2- ", text)
    text = BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()


def convert_runs(runs: Sequence[RichTextRun]) -> str:
    """Wrap styled runs in emphasis markers, recover inline numbered lists, normalise."""
    markdown = "".join(_wrap_run(run) for run in runs)
    markdown = INLINE_NUMBER_RE.sub(r"\1\2\n\3 ", markdown)
    return normalize_plain_text(markdown)


def convert_html(html: str) -> str:
    return convert_runs(html_to_runs(html))


def convert(source: Union[Sequence[RichTextRun], bytes, str]) -> str:
    """Convert pasted content to markdown.

    Accepts styled runs, raw rich-markup bytes, or a string; strings that
    contain HTML tags go through the HTML reader, anything else is treated as
    plain text.
    """
    if isinstance(source, bytes):
        source = source.decode("utf-8", errors="replace")
    if isinstance(source, str):
        if HTML_TAG_RE.search(source):
            return convert_html(source)
        return normalize_plain_text(source)
    return convert_runs(source)
