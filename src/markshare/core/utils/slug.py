"""Slug generation for exported file names"""

import re
import unicodedata


def slugify(text: str) -> str:
    """Lowercase, ASCII-fold and hyphenate text for use as a file stem."""
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = re.sub(r'[^\w\s-]', '', text.lower())
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')
