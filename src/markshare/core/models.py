"""Data models for the render and paste pipelines"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class BlockType(str, Enum):
    header = "header"
    paragraph = "paragraph"
    code = "code"
    blockquote = "blockquote"
    unordered_list = "unordered_list"
    ordered_list = "ordered_list"
    table = "table"
    rule = "rule"
    thinking = "thinking"


class Alignment(str, Enum):
    none = "none"
    left = "left"
    center = "center"
    right = "right"


class ListItem(BaseModel):
    """A single list entry; content is raw inline markdown."""
    content: str
    is_task: bool = False
    is_checked: bool = False


class TableSpec(BaseModel):
    headers: list[str]
    alignments: list[Alignment] = []
    rows: list[list[str]] = []

    def alignment(self, column: int) -> Alignment:
        """Alignment for a column index; columns past the delimiter row get none."""
        return self.alignments[column] if column < len(self.alignments) else Alignment.none


class Header(BaseModel):
    type: Literal[BlockType.header] = BlockType.header
    level: int = Field(ge=1, le=6)
    text: str


class Paragraph(BaseModel):
    type: Literal[BlockType.paragraph] = BlockType.paragraph
    text: str


class CodeBlock(BaseModel):
    type: Literal[BlockType.code] = BlockType.code
    language: Optional[str] = None
    lines: list[str] = []       # verbatim source lines, escaped only at emission


class Blockquote(BaseModel):
    type: Literal[BlockType.blockquote] = BlockType.blockquote
    blocks: list[Block] = []


class UnorderedList(BaseModel):
    type: Literal[BlockType.unordered_list] = BlockType.unordered_list
    items: list[ListItem]


class OrderedList(BaseModel):
    type: Literal[BlockType.ordered_list] = BlockType.ordered_list
    items: list[ListItem]


class Table(BaseModel):
    type: Literal[BlockType.table] = BlockType.table
    spec: TableSpec


class HorizontalRule(BaseModel):
    type: Literal[BlockType.rule] = BlockType.rule


class ThinkingPlaceholder(BaseModel):
    type: Literal[BlockType.thinking] = BlockType.thinking
    id: str


Block = Annotated[
    Union[
        Header, Paragraph, CodeBlock, Blockquote, UnorderedList,
        OrderedList, Table, HorizontalRule, ThinkingPlaceholder,
    ],
    Field(discriminator="type"),
]

Blockquote.model_rebuild()


class SpanType(str, Enum):
    bold = "bold"
    italic = "italic"
    bold_italic = "bold_italic"
    strikethrough = "strikethrough"
    code = "code"
    link = "link"
    image = "image"
    line_break = "line_break"


@dataclass
class InlineSpan:
    """A formatted inline region.

    children holds already-escaped strings and nested spans. For links and
    images target is the sanitized URL; an image's alt text is its only child.
    """
    type:     SpanType
    children: list
    target:   Optional[str] = None


@dataclass
class ThinkingBlock:
    """A <think>/<thinking> region lifted out of the source before block parsing."""
    id:          str    # placeholder token left in the stripped markdown
    raw_content: str


class Role(str, Enum):
    user = "User"
    assistant = "Assistant"
    system = "System"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None


class ConversationEntry(BaseModel):
    role: Role = Role.user
    content: str = ""


class RichTextRun(BaseModel):
    """A contiguous span of pasted text sharing one style."""
    text: str
    is_bold: bool = False
    is_italic: bool = False
