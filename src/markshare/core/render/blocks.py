"""Line-oriented block parser: markdown lines -> Block list -> HTML body"""

from typing import Collection, Optional

from markshare.core.models import (
    Block,
    Blockquote,
    CodeBlock,
    Header,
    HorizontalRule,
    Paragraph,
    ThinkingPlaceholder,
)
from markshare.core.render.emit import render_blocks
from markshare.core.render.lists import (
    is_ordered_item,
    is_unordered_item,
    parse_ordered_list,
    parse_unordered_list,
)
from markshare.core.render.tables import is_table_delimiter, parse_table


FENCE = "```"
RULE_CHARS = "-*_"


def _header(line: str) -> Optional[Header]:
    """Parse an ATX header; a space after the hashes is not required."""
    trimmed = line.strip()
    level = len(trimmed) - len(trimmed.lstrip("#"))
    if not 1 <= level <= 6:
        return None
    content = trimmed[level:].strip()
    while content.endswith("#"):
        content = content[:-1].strip()
    return Header(level=level, text=content)


def is_horizontal_rule(line: str) -> bool:
    trimmed = line.strip()
    if len(trimmed) < 3:
        return False
    for char in RULE_CHARS:
        if all(c in (char, " ") for c in trimmed) and trimmed.count(char) >= 3:
            return True
    return False


def _has_table_at(lines: list[str], i: int) -> bool:
    return i + 1 < len(lines) and is_table_delimiter(lines[i + 1])


def _parse_fence(lines: list[str], start: int) -> tuple[CodeBlock, int]:
    language = lines[start][len(FENCE):].strip() or None
    code: list[str] = []
    i = start + 1
    while i < len(lines):
        if lines[i].startswith(FENCE):
            i += 1
            break
        code.append(lines[i])
        i += 1
    return CodeBlock(language=language, lines=code), i


def _parse_blockquote(
    lines: list[str],
    start: int,
    placeholders: Collection[str],
    ) -> tuple[Blockquote, int]:
    quoted: list[str] = []
    i = start
    while i < len(lines):
        line = lines[i]
        if line.startswith(">"):
            content = line[1:]
            quoted.append(content[1:] if content.startswith(" ") else content)
            i += 1
        elif not line.strip() and i + 1 < len(lines) and lines[i + 1].startswith(">"):
            quoted.append("")
            i += 1
        else:
            break
    return Blockquote(blocks=parse_blocks(quoted, placeholders)), i


def _starts_block(lines: list[str], i: int, placeholders: Collection[str]) -> bool:
    """True if lines[i] opens any construct that interrupts a paragraph."""
    line = lines[i]
    return (
        not line.strip()
        or line.strip() in placeholders
        or line.startswith(FENCE)
        or line.startswith(">")
        or is_unordered_item(line)
        or is_ordered_item(line)
        or _header(line) is not None
        or is_horizontal_rule(line)
        or _has_table_at(lines, i)
    )


def _parse_paragraph(
    lines: list[str],
    start: int,
    placeholders: Collection[str],
    ) -> tuple[Paragraph, int]:
    """Join trimmed lines with a space; a line ending in two spaces keeps a hard break."""
    text = lines[start].strip()
    hard_break = lines[start].endswith("  ")
    i = start + 1
    while i < len(lines) and not _starts_block(lines, i, placeholders):
        text += ("  \n" if hard_break else " ") + lines[i].strip()
        hard_break = lines[i].endswith("  ")
        i += 1
    return Paragraph(text=text), i


def parse_blocks(lines: list[str], placeholders: Collection[str] = ()) -> list[Block]:
    """Split lines into blocks in one forward pass; first matching construct wins."""
    blocks: list[Block] = []
    i = 0

    while i < len(lines):
        line = lines[i]

        if line.strip() and line.strip() in placeholders:
            blocks.append(ThinkingPlaceholder(id=line.strip()))
            i += 1
        elif line.startswith(FENCE):
            block, i = _parse_fence(lines, i)
            blocks.append(block)
        elif _has_table_at(lines, i):
            block, i = parse_table(lines, i)
            blocks.append(block)
        elif line.startswith(">"):
            block, i = _parse_blockquote(lines, i, placeholders)
            blocks.append(block)
        elif is_unordered_item(line):
            block, i = parse_unordered_list(lines, i)
            blocks.append(block)
        elif is_ordered_item(line):
            block, i = parse_ordered_list(lines, i)
            blocks.append(block)
        elif (header := _header(line)) is not None:
            blocks.append(header)
            i += 1
        elif is_horizontal_rule(line):
            blocks.append(HorizontalRule())
            i += 1
        elif not line.strip():
            i += 1
        else:
            block, i = _parse_paragraph(lines, i, placeholders)
            blocks.append(block)

    return blocks


def convert_to_html(markdown: str, placeholders: Collection[str] = ()) -> str:
    """Render markdown to an HTML body fragment; blank input gives ''."""
    lines = markdown.replace("\r\n", "\n").split("\n")
    return render_blocks(parse_blocks(lines, placeholders))
