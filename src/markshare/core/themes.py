"""Theme stylesheets: bundled CSS files, an optional user directory, and a fallback"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

BUNDLED_THEMES_DIR = Path(__file__).resolve().parent.parent / "themes"

FALLBACK_CSS = """\
body {
    font-family: -apple-system, BlinkMacSystemFont, sans-serif;
    font-size: 16px;
    line-height: 1.6;
    padding: 20px;
    max-width: 800px;
    margin: 0 auto;
}
pre, code {
    font-family: monospace;
    background-color: #f5f5f5;
    padding: 2px 4px;
    border-radius: 4px;
}
pre {
    padding: 1em;
    overflow-x: auto;
}
pre code {
    padding: 0;
    background: none;
}
blockquote {
    border-left: 4px solid #ddd;
    margin: 1em 0;
    padding-left: 1em;
    color: #666;
}
table {
    border-collapse: collapse;
    width: 100%;
}
th, td {
    border: 1px solid #ddd;
    padding: 8px;
    text-align: left;
}
th {
    background-color: #f5f5f5;
}
"""


class Theme(str, Enum):
    light = "light"
    dark = "dark"
    github = "github"
    sepia = "sepia"

    @property
    def display_name(self) -> str:
        return "GitHub" if self is Theme.github else self.value.capitalize()

    @property
    def css_filename(self) -> str:
        return f"{self.value}.css"


def load_css(theme: Theme, themes_dir: Optional[Path] = None) -> str:
    """Return CSS for theme from themes_dir, then the bundled themes, then FALLBACK_CSS."""
    candidates = [Path(themes_dir)] if themes_dir else []
    candidates.append(BUNDLED_THEMES_DIR)

    for directory in candidates:
        path = directory / theme.css_filename
        if not path.is_file():
            continue
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read theme %s from %s: %s", theme.value, path, e)

    logger.warning("Theme %s not found; using fallback stylesheet", theme.value)
    return FALLBACK_CSS
