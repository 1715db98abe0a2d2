"""Block list -> HTML body emission"""

from markshare.core.models import (
    Alignment,
    Block,
    BlockType,
    ListItem,
    TableSpec,
)
from markshare.core.render.escape import escape_html
from markshare.core.render.inline import format_inline


CHECKBOX_CHECKED = '<input type="checkbox" checked disabled>'
CHECKBOX_UNCHECKED = '<input type="checkbox" disabled>'


def _align_attr(alignment: Alignment) -> str:
    if alignment is Alignment.none:
        return ""
    return f' style="text-align: {alignment.value}"'


def _list_item(item: ListItem) -> str:
    if item.is_task:
        checkbox = CHECKBOX_CHECKED if item.is_checked else CHECKBOX_UNCHECKED
        return f'<li class="task-list-item">{checkbox} {format_inline(item.content)}</li>\n'
    return f"<li>{format_inline(item.content)}</li>\n"


def _table(spec: TableSpec) -> str:
    html = "<table>\n<thead>\n<tr>\n"
    for col, header in enumerate(spec.headers):
        html += f"<th{_align_attr(spec.alignment(col))}>{format_inline(header)}</th>\n"
    html += "</tr>\n</thead>\n<tbody>\n"
    for row in spec.rows:
        html += "<tr>\n"
        for col, cell in enumerate(row):
            html += f"<td{_align_attr(spec.alignment(col))}>{format_inline(cell)}</td>\n"
        html += "</tr>\n"
    return html + "</tbody>\n</table>\n"


def render_block(block: Block) -> str:
    if block.type is BlockType.header:
        return f"<h{block.level}>{format_inline(block.text)}</h{block.level}>\n"
    if block.type is BlockType.paragraph:
        return f"<p>{format_inline(block.text)}</p>\n"
    if block.type is BlockType.code:
        lang = f' class="language-{escape_html(block.language)}"' if block.language else ""
        code = "\n".join(escape_html(line) for line in block.lines)
        return f"<pre><code{lang}>{code}</code></pre>\n"
    if block.type is BlockType.blockquote:
        return f"<blockquote>{render_blocks(block.blocks)}</blockquote>\n"
    if block.type is BlockType.unordered_list:
        return "<ul>\n" + "".join(_list_item(i) for i in block.items) + "</ul>\n"
    if block.type is BlockType.ordered_list:
        return "<ol>\n" + "".join(_list_item(i) for i in block.items) + "</ol>\n"
    if block.type is BlockType.table:
        return _table(block.spec)
    if block.type is BlockType.rule:
        return "<hr>\n"
    if block.type is BlockType.thinking:
        return f"{block.id}\n"
    raise ValueError(f"Unknown block type: {block.type}")


def render_blocks(blocks: list[Block]) -> str:
    return "".join(render_block(b) for b in blocks)
