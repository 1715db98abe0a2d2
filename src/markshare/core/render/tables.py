"""GFM-style pipe table detection and parsing"""

from markshare.core.models import Alignment, Table, TableSpec


# ASCII hyphen plus the Unicode dashes rich-text editors substitute for it
DASH_CHARS = frozenset(
    "-\u2010\u2011\u2012\u2013\u2014\u2015\u2212\u2e3a\u2e3b\ufe58\ufe63\uff0d"
)


def is_table_delimiter(line: str) -> bool:
    """True for a row like |:---|:--:|---:| (edge pipes optional)."""
    trimmed = line.strip()
    if "|" not in trimmed:
        return False

    cells = [c for c in trimmed.split("|") if c]
    for cell in cells:
        content = cell.strip()
        if content.startswith(":"):
            content = content[1:]
        if content.endswith(":"):
            content = content[:-1]
        if not content or not all(ch in DASH_CHARS for ch in content):
            return False
    return bool(cells)


def split_row(line: str) -> list[str]:
    """Split a pipe row into trimmed cells, dropping one leading and trailing pipe."""
    trimmed = line.strip()
    if trimmed.startswith("|"):
        trimmed = trimmed[1:]
    if trimmed.endswith("|"):
        trimmed = trimmed[:-1]
    return [cell.strip() for cell in trimmed.split("|")]


def _alignment(cell: str) -> Alignment:
    left, right = cell.startswith(":"), cell.endswith(":")
    if left and right:
        return Alignment.center
    if right:
        return Alignment.right
    if left:
        return Alignment.left
    return Alignment.none


def parse_table(lines: list[str], start: int) -> tuple[Table, int]:
    """Parse header + delimiter at start and every following row containing '|'."""
    headers = split_row(lines[start])
    alignments = [_alignment(cell) for cell in split_row(lines[start + 1])]

    rows = []
    i = start + 2
    while i < len(lines) and "|" in lines[i]:
        rows.append(split_row(lines[i]))
        i += 1

    return Table(spec=TableSpec(headers=headers, alignments=alignments, rows=rows)), i
