"""Pipeline step functions: render files, render conversations, convert pastes"""

import logging
from pathlib import Path
from typing import Optional

from markshare.core.export import DocumentRenderer, ExportError, ExportFormat, export_document
from markshare.core.parse import discover_files, load_conversation, read_markdown
from markshare.core.paste.convert import convert, convert_html, normalize_plain_text
from markshare.core.render.renderer import render, render_conversation


logger = logging.getLogger(__name__)


def run_render(
    path: str,
    css: str,
    output_dir: Path,
    fmt: ExportFormat = ExportFormat.html,
    renderer: Optional[DocumentRenderer] = None,
    ) -> list[tuple[Path, Path]]:
    """Render each markdown file under path. Returns (source_path, output_file) pairs."""
    results = []
    for p in discover_files(Path(path)):
        try:
            frontmatter, body = read_markdown(p)
            html = render(body, css)
            name = str(frontmatter.get('slug') or p.stem)
            out_file = export_document(html, output_dir, name, fmt, renderer)
        except ExportError:
            raise
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        logger.debug("Rendered %s -> %s", p, out_file)
        results.append((p, out_file))
    return results


def run_conversation(
    path: str,
    css: str,
    output_dir: Path,
    fmt: ExportFormat = ExportFormat.html,
    max_workers: int = 1,
    renderer: Optional[DocumentRenderer] = None,
    ) -> tuple[int, Path]:
    """Render a conversation file. Returns (entry_count, output_file)."""
    source = Path(path)
    entries = load_conversation(source)
    html = render_conversation(entries, css, max_workers=max_workers)
    out_file = export_document(html, output_dir, source.stem, fmt, renderer)
    logger.debug("Rendered %d entries from %s -> %s", len(entries), source, out_file)
    return len(entries), out_file


def run_paste(path: str, as_html: Optional[bool] = None) -> str:
    """Convert a pasted-content file to markdown.

    as_html=None sniffs the content; True forces the HTML reader and False
    forces plain-text cleanup.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e

    if as_html is False:
        return normalize_plain_text(raw.decode("utf-8", errors="replace"))
    if as_html:
        return convert_html(raw.decode("utf-8", errors="replace"))
    return convert(raw)
