"""Flat unordered/ordered list parsing with task-list detection"""

import re
from typing import Callable

from markshare.core.models import ListItem, OrderedList, UnorderedList


UNORDERED_MARKERS = ("- ", "* ", "+ ")
ORDERED_RE = re.compile(r"^\d+\. ")
TASK_MARKERS = {"[ ] ": False, "[x] ": True, "[X] ": True}


def is_unordered_item(line: str) -> bool:
    return line.strip().startswith(UNORDERED_MARKERS)


def is_ordered_item(line: str) -> bool:
    return ORDERED_RE.match(line.strip()) is not None


def _is_indented(line: str) -> bool:
    return line.startswith(("  ", "\t"))


def _unordered_content(line: str) -> str:
    return line.strip()[2:]


def _ordered_content(line: str) -> str:
    trimmed = line.strip()
    return trimmed[ORDERED_RE.match(trimmed).end():]


def parse_task_item(content: str) -> ListItem:
    """Detect a [ ] / [x] / [X] marker in the first four characters of trimmed content."""
    trimmed = content.strip()
    checked = TASK_MARKERS.get(trimmed[:4])
    if checked is None:
        return ListItem(content=content)
    return ListItem(content=trimmed[4:], is_task=True, is_checked=checked)


def _collect_items(
    lines: list[str],
    start: int,
    is_item: Callable[[str], bool],
    content_of: Callable[[str], str],
    ) -> tuple[list[str], int]:
    """Gather raw item texts for one list; returns (items, next_index).

    Indented lines continue the current item on a new line. A blank line ends
    the list unless the next line is another item or an indented continuation.
    """
    items: list[str] = []
    current: list[str] = []
    i = start

    while i < len(lines):
        line = lines[i]
        if is_item(line):
            if current:
                items.append("\n".join(current))
            current = [content_of(line)]
            i += 1
        elif _is_indented(line) and line.strip():
            current.append(line.strip())
            i += 1
        elif not line.strip():
            i += 1
            if i < len(lines) and not is_item(lines[i]) and not _is_indented(lines[i]):
                break
        else:
            break

    if current:
        items.append("\n".join(current))
    return items, i


def parse_unordered_list(lines: list[str], start: int) -> tuple[UnorderedList, int]:
    items, end = _collect_items(lines, start, is_unordered_item, _unordered_content)
    return UnorderedList(items=[parse_task_item(item) for item in items]), end


def parse_ordered_list(lines: list[str], start: int) -> tuple[OrderedList, int]:
    items, end = _collect_items(lines, start, is_ordered_item, _ordered_content)
    return OrderedList(items=[ListItem(content=item) for item in items]), end
