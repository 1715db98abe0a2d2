"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from markshare.config import Settings, load_config
from markshare.core.export import ExportError, ExportFormat
from markshare.core.pipeline import run_conversation, run_paste, run_render
from markshare.core.themes import Theme, load_css


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _css(settings: Settings) -> str:
    themes_dir = Path(settings.themes_dir) if settings.themes_dir else None
    return load_css(Theme(settings.theme), themes_dir)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file or directory to render")],
    theme: Annotated[Optional[str], typer.Option("--theme", help="light, dark, github or sepia")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="html, pdf or png")] = None,
    ):
    """Render markdown files to standalone themed documents."""
    settings = _settings(overrides={"theme": theme, "output_dir": out, "output_format": fmt})
    output_dir = Path(settings.output_dir)

    try:
        results = run_render(path, _css(settings), output_dir, ExportFormat(settings.output_format))
    except ExportError as e:
        _fail("Export failed", e)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No markdown files found at {path}.")
        raise typer.Exit(1)

    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def conversation_cmd(
    path: Annotated[str, typer.Argument(help="YAML or JSON list of {role, content} entries")],
    theme: Annotated[Optional[str], typer.Option("--theme", help="light, dark, github or sepia")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="html, pdf or png")] = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Worker threads for entry rendering")] = None,
    ):
    """Render a role-tagged conversation to a single document."""
    settings = _settings(overrides={
        "theme": theme, "output_dir": out,
        "output_format": fmt, "max_workers": workers,
    })
    output_dir = Path(settings.output_dir)

    try:
        count, out_file = run_conversation(
            path, _css(settings), output_dir,
            ExportFormat(settings.output_format), settings.max_workers,
        )
    except ExportError as e:
        _fail("Export failed", e)
    except (OSError, ValueError) as e:
        _fail(f"Could not load conversation {path}", e)
    typer.echo(f"Rendered {count} entries -> {out_file}")


def paste_cmd(
    path: Annotated[str, typer.Argument(help="File holding pasted HTML or plain text")],
    html: Annotated[Optional[bool], typer.Option("--html/--text", help="Force HTML or plain-text handling")] = None,
    out: Annotated[Optional[str], typer.Option("--out", help="Write markdown here instead of stdout")] = None,
    ):
    """Convert pasted rich text to markdown."""
    _settings()
    try:
        markdown = run_paste(path, as_html=html)
    except RuntimeError as e:
        _fail(str(e))

    if out is None:
        typer.echo(markdown)
        return
    try:
        Path(out).write_text(markdown + "\n", encoding="utf-8")
    except OSError as e:
        _fail(f"Could not write {out}", e)
    typer.echo(f"Wrote {out}")


def themes_cmd():
    """List available themes."""
    settings = _settings()
    for theme in Theme:
        marker = "*" if theme.value == settings.theme else " "
        typer.echo(f"{marker} {theme.value:<8} {theme.display_name}")
