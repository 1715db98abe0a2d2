"""HTML fragment -> styled text runs, as a rich-text pasteboard would deliver them"""

import re

from bs4 import (
    BeautifulSoup,
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from markshare.core.models import RichTextRun


HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
BOLD_TAGS = {"b", "strong", "th"} | HEADING_TAGS
ITALIC_TAGS = {"i", "em"}
SKIPPED_TAGS = {"script", "style", "head", "title", "meta", "template", "noscript"}
# block elements followed by a blank line vs. a single newline
PARAGRAPH_TAGS = {"p", "blockquote", "pre", "ul", "ol", "table"} | HEADING_TAGS
LINE_TAGS = {"div", "li", "tr", "section", "article", "header", "footer", "dd", "dt"}
CELL_TAGS = {"td", "th"}
CELL_SEPARATOR = " | "
NON_TEXT_STRINGS = (CData, Comment, Declaration, Doctype, ProcessingInstruction)

FONT_WEIGHT_RE = re.compile(r"font-weight\s*:\s*([a-z]+|\d+)", re.IGNORECASE)
FONT_STYLE_RE = re.compile(r"font-style\s*:\s*([a-z]+)", re.IGNORECASE)
WHITESPACE_RE = re.compile(r"\s+")


class _RunBuilder:
    """Accumulates runs, merging neighbours that share a style."""

    def __init__(self):
        self.runs: list[RichTextRun] = []

    def _tail(self) -> str:
        return self.runs[-1].text if self.runs else ""

    def at_line_start(self) -> bool:
        return not self.runs or self._tail().endswith("\n")

    def add(self, text: str, bold: bool = False, italic: bool = False) -> None:
        if not text:
            return
        last = self.runs[-1] if self.runs else None
        if last and last.is_bold == bold and last.is_italic == italic:
            last.text += text
        else:
            self.runs.append(RichTextRun(text=text, is_bold=bold, is_italic=italic))

    def text(self, text: str, bold: bool, italic: bool, preformatted: bool) -> None:
        if not preformatted:
            text = WHITESPACE_RE.sub(" ", text)
            if self.at_line_start():
                text = text.lstrip()
        self.add(text, bold, italic)

    def break_line(self, count: int = 1) -> None:
        """End the current line, emitting at most count trailing newlines."""
        if not self.runs:
            return
        present = len(self._tail()) - len(self._tail().rstrip("\n"))
        if present < count:
            self.add("\n" * (count - present))

    def separate(self, separator: str) -> None:
        """Put separator between two inline items on the same line."""
        if self.at_line_start():
            return
        last = self.runs[-1]
        last.text = last.text.rstrip(" ")
        if not last.text:
            self.runs.pop()
            if self.at_line_start():
                return
        self.add(separator)


def _style_flags(tag: Tag, bold: bool, italic: bool) -> tuple[bool, bool]:
    if tag.name in BOLD_TAGS:
        bold = True
    if tag.name in ITALIC_TAGS:
        italic = True

    style = tag.get("style") or ""
    if m := FONT_WEIGHT_RE.search(style):
        weight = m.group(1).lower()
        bold = weight in ("bold", "bolder") or (weight.isdigit() and int(weight) >= 600)
    if m := FONT_STYLE_RE.search(style):
        italic = m.group(1).lower() in ("italic", "oblique")
    return bold, italic


def _list_prefix(tag: Tag) -> str:
    """Bullet for ul items, 'N. ' for ol items (honouring start=)."""
    parent = tag.parent
    if parent is None or parent.name != "ol":
        return "• "
    start = str(parent.get("start", "1"))
    number = int(start) if start.isdigit() else 1
    return f"{number + len(tag.find_previous_siblings('li'))}. "


def _walk(node: Tag, out: _RunBuilder, bold: bool, italic: bool, pre: bool) -> None:
    for child in node.children:
        if isinstance(child, NON_TEXT_STRINGS):
            continue
        if isinstance(child, NavigableString):
            out.text(str(child), bold, italic, pre)
            continue
        if not isinstance(child, Tag) or child.name in SKIPPED_TAGS:
            continue

        name = child.name
        if name == "br":
            out.add("\n")
            continue
        if name == "hr":
            out.break_line()
            out.add("---")
            out.break_line(2)
            continue

        if name in PARAGRAPH_TAGS or name in LINE_TAGS:
            out.break_line()
        if name == "li":
            out.add(_list_prefix(child))
        elif name in CELL_TAGS:
            out.separate(CELL_SEPARATOR)

        child_bold, child_italic = _style_flags(child, bold, italic)
        _walk(child, out, child_bold, child_italic, pre or name == "pre")

        if name in PARAGRAPH_TAGS:
            out.break_line(2)
        elif name in LINE_TAGS:
            out.break_line()


def html_to_runs(html: str) -> list[RichTextRun]:
    """Read an HTML fragment into bold/italic runs with block structure as newlines."""
    soup = BeautifulSoup(html, "html.parser")
    out = _RunBuilder()
    _walk(soup, out, False, False, False)
    return out.runs
