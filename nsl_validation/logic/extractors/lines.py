"""Line locator: map text fragments and offsets back to 1-based line numbers."""

from typing import List, Optional, Tuple


def find_line_number(text: str, search: str) -> Optional[int]:
    """
    Return the 1-based number of the first line containing search.

    First match wins; callers pass a key specific enough to pick the line
    they mean. Returns None for empty input or when nothing matches.
    """
    if not text or not search:
        return None
    for index, line in enumerate(text.split("\n")):
        if search in line:
            return index + 1
    return None


def line_of_offset(text: str, offset: int) -> int:
    """1-based line number of a character offset into text."""
    return text.count("\n", 0, max(offset, 0)) + 1


def numbered_lines(text: str) -> List[Tuple[int, str]]:
    """Split text into (lineno, line) pairs, lineno starting at 1."""
    if not text:
        return []
    return [(index + 1, line) for index, line in enumerate(text.split("\n"))]


def unique_lines(lines: List[Optional[int]]) -> List[int]:
    """Drop None and duplicates, keeping first-seen order."""
    seen = {}
    for line in lines:
        if line is not None:
            seen.setdefault(line, None)
    return list(seen)
