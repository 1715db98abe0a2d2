"""Protected-region handling for <think>/<thinking> blocks.

extract() swaps each region for a placeholder token before block parsing;
restore() renders each region's markdown on its own and splices it back.
"""

import re
import secrets

from markshare.core.models import ThinkingBlock
from markshare.core.render.blocks import convert_to_html


THINKING_RE = re.compile(r"<(think|thinking)>([\s\S]*?)</\1>")

THINKING_TEMPLATE = """\
<div class="thinking-block">
  <div class="thinking-content">
{inner}
  </div>
</div>"""


def _nonce(markdown: str) -> str:
    """Return a hex nonce that does not already occur in markdown."""
    while True:
        nonce = secrets.token_hex(8)
        if nonce not in markdown:
            return nonce


def placeholder(nonce: str, index: int) -> str:
    """Letters and digits only, so escaping and inline passes leave it intact."""
    return f"XTHINKINGBLOCK{nonce}X{index}XTHINKINGBLOCKX"


def extract(markdown: str) -> tuple[str, list[ThinkingBlock]]:
    """Replace thinking regions with placeholders; blocks come back in document order.

    Unterminated tags do not match and stay in the text as literals.
    """
    matches = list(THINKING_RE.finditer(markdown))
    if not matches:
        return markdown, []

    nonce = _nonce(markdown)
    result = markdown
    blocks: list[ThinkingBlock] = []
    for index in reversed(range(len(matches))):
        m = matches[index]
        token = placeholder(nonce, index)
        blocks.insert(0, ThinkingBlock(id=token, raw_content=m.group(2).strip()))
        result = result[:m.start()] + token + result[m.end():]
    return result, blocks


def _render_region(markdown: str) -> str:
    stripped, blocks = extract(markdown)
    return restore(convert_to_html(stripped, {b.id for b in blocks}), blocks)


def restore(html: str, blocks: list[ThinkingBlock]) -> str:
    """Render each block's markdown and splice it in place of its placeholder."""
    for block in blocks:
        rendered = THINKING_TEMPLATE.format(inner=_render_region(block.raw_content))
        html = html.replace(block.id, rendered)
    return html
