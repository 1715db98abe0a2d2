"""Input loading: file discovery, frontmatter stripping, conversation files"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from markshare.core.models import ConversationEntry


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.markdown', '.mdx'}

_ENTRIES = TypeAdapter(list[ConversationEntry])


def strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def read_markdown(path: Path) -> tuple[dict[str, Any], str]:
    """Read a markdown file as UTF-8 and split off its frontmatter."""
    frontmatter, body = strip_frontmatter(path.read_text(encoding='utf-8'))
    logger.debug("Read %s (%d chars, frontmatter keys: %s)", path, len(body), list(frontmatter))
    return frontmatter, body


def load_conversation(path: Path) -> list[ConversationEntry]:
    """Load a YAML or JSON list of {role, content} mappings."""
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid conversation file {path}: {e}") from e
    try:
        return _ENTRIES.validate_python(data or [])
    except ValidationError as e:
        raise ValueError(f"Invalid conversation file {path}: {e}") from e
