"""Export rendered HTML documents to files.

HTML is written directly. PDF and PNG need an external document renderer, a
callable taking (html, fmt) and returning the encoded bytes.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from markshare.core.utils.slug import slugify


logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    html = "html"
    pdf = "pdf"
    png = "png"

    @property
    def file_extension(self) -> str:
        return self.value

    @property
    def mime_type(self) -> str:
        return {
            ExportFormat.html: "text/html",
            ExportFormat.pdf: "application/pdf",
            ExportFormat.png: "image/png",
        }[self]


DocumentRenderer = Callable[[str, ExportFormat], bytes]


class ExportError(RuntimeError):
    """Base class for export failures."""


class ContentEncodingError(ExportError):
    """The HTML could not be encoded for output."""


class RenderError(ExportError):
    """The external document renderer is missing or failed."""


class SaveError(ExportError):
    """The exported file could not be written."""


def encode_document(
    html: str,
    fmt: ExportFormat,
    renderer: Optional[DocumentRenderer] = None,
    ) -> bytes:
    """Produce the output bytes for fmt."""
    if fmt is ExportFormat.html:
        try:
            return html.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ContentEncodingError(f"Failed to encode HTML content: {e}") from e

    if renderer is None:
        raise RenderError(f"No document renderer configured for {fmt.value.upper()} export")
    try:
        return renderer(html, fmt)
    except Exception as e:
        raise RenderError(f"Failed to generate {fmt.value.upper()}: {e}") from e


def export_document(
    html: str,
    output_dir: Path,
    name: str,
    fmt: ExportFormat = ExportFormat.html,
    renderer: Optional[DocumentRenderer] = None,
    ) -> Path:
    """Write html as output_dir/<slug(name)>.<ext> and return the path."""
    data = encode_document(html, fmt, renderer)
    path = output_dir / f"{slugify(name) or 'document'}.{fmt.file_extension}"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise SaveError(f"Failed to save exported file {path}: {e}") from e
    logger.info("Exported %s (%d bytes)", path, len(data))
    return path
