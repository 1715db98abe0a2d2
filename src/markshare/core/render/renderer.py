"""Render entry points for single documents and role-tagged conversations"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from markshare.core.models import ConversationEntry
from markshare.core.render.blocks import convert_to_html
from markshare.core.render.document import wrap_document
from markshare.core.render.thinking import extract, restore


logger = logging.getLogger(__name__)

ENTRY_TEMPLATE = """\
  <div class="conversation-entry {role_class}">
    <div class="role-label">{role_label}</div>
    <div class="message-content">
{content}
    </div>
  </div>
"""


def render_body(markdown: str) -> str:
    """Run the per-entry pipeline: extract thinking blocks, parse, splice back."""
    stripped, blocks = extract(markdown)
    html = convert_to_html(stripped, {b.id for b in blocks})
    return restore(html, blocks)


def render(markdown: str, css: str) -> str:
    """Render markdown to a complete HTML document."""
    return wrap_document(render_body(markdown), css)


def _render_entry(entry: ConversationEntry) -> str:
    return ENTRY_TEMPLATE.format(
        role_class=entry.role.value.lower(),
        role_label=entry.role.value,
        content=render_body(entry.content),
    )


def render_conversation(
    entries: Sequence[ConversationEntry],
    css: str,
    max_workers: int = 1,
    ) -> str:
    """Render entries in input order inside a conversation container.

    Entries share no parse state, so with max_workers > 1 they render on a
    thread pool; results are collected in order and match sequential output.
    """
    if max_workers > 1 and len(entries) > 1:
        logger.debug("Rendering %d entries on %d workers", len(entries), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            rendered = list(pool.map(_render_entry, entries))
    else:
        rendered = [_render_entry(e) for e in entries]

    body = '<div class="conversation">\n' + "".join(rendered) + "</div>"
    return wrap_document(body, css)
