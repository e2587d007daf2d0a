"""
Section extractors shared by the process, tenant and local objective families.

Those documents are laid out as a preamble of "Key: value" lines followed by
titled sections ("Process Flow:" on a line of its own). Inside a section,
"- Key: value" lines are fields and "N. ..." lines are numbered items.

Functions take rows, a list of (lineno, line) pairs, so a caller can run them
over a slice of the document and keep real line numbers.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

Row = Tuple[int, str]

SECTION_HEADER_RE = re.compile(r"^\s*(?:#{1,6}\s*)?([A-Za-z][A-Za-z0-9 /&()'-]*?)\s*:\s*$")
PREAMBLE_FIELD_RE = re.compile(r"^\s*(?:#{1,6}\s*)?([A-Za-z][A-Za-z0-9 /&'-]*?)\s*:\s*(.+)$")
FIELD_RE = re.compile(r"^\s*[-*]\s*([A-Za-z][A-Za-z0-9 /&'()-]*?)\s*:\s*(.*)$")
NUMBERED_RE = re.compile(r"^\s*(\d+)\.\s*(.*)$")
LO_REF_RE = re.compile(r"\bLO-(\d+)\b")

MINOR_WORDS = {"a", "an", "and", "as", "at", "by", "for", "in", "of", "on", "or", "the", "to", "with"}


@dataclass(frozen=True)
class Field:
    key: str
    value: str
    line: int


@dataclass(frozen=True)
class Section:
    label: str
    line: int
    body: Tuple[Row, ...]


@dataclass(frozen=True)
class NumberedItem:
    number: int
    name: str
    line: int
    fields: Dict[str, Field] = field(default_factory=dict)
    rows: Tuple[Row, ...] = ()


def is_section_header(line: str) -> Optional[str]:
    match = SECTION_HEADER_RE.match(line)
    return match.group(1).strip() if match else None


def find_section_headers(rows: Sequence[Row]) -> List[Tuple[str, int]]:
    """(label, lineno) for every section header line."""
    headers = []
    for lineno, line in rows:
        label = is_section_header(line)
        if label:
            headers.append((label, lineno))
    return headers


def split_sections(rows: Sequence[Row]) -> List[Section]:
    sections = []
    current_label = None
    current_line = 0
    body: List[Row] = []
    for lineno, line in rows:
        label = is_section_header(line)
        if label:
            if current_label is not None:
                sections.append(Section(current_label, current_line, tuple(body)))
            current_label, current_line, body = label, lineno, []
        elif current_label is not None:
            body.append((lineno, line))
    if current_label is not None:
        sections.append(Section(current_label, current_line, tuple(body)))
    return sections


def get_section(sections: Sequence[Section], label: str) -> Optional[Section]:
    """First section with exactly this label."""
    for section in sections:
        if section.label == label:
            return section
    return None


def parse_preamble(rows: Sequence[Row]) -> Dict[str, Field]:
    """"Key: value" lines before the first section header; first occurrence wins."""
    fields: Dict[str, Field] = {}
    for lineno, line in rows:
        if is_section_header(line):
            break
        match = PREAMBLE_FIELD_RE.match(line)
        if match:
            key = match.group(1).strip()
            if key not in fields:
                fields[key] = Field(key, match.group(2).strip(), lineno)
    return fields


def parse_fields(rows: Sequence[Row]) -> Dict[str, Field]:
    """"- Key: value" lines; first occurrence of a key wins."""
    fields: Dict[str, Field] = {}
    for lineno, line in rows:
        match = FIELD_RE.match(line)
        if match:
            key = match.group(1).strip()
            if key not in fields:
                fields[key] = Field(key, match.group(2).strip(), lineno)
    return fields


def parse_numbered_items(rows: Sequence[Row], kind: Optional[str] = None) -> List[NumberedItem]:
    """
    Numbered items ("1. Name" or, with kind, "1. Kind: Name") and the field
    lines that follow each one.
    """
    prefix = re.compile(rf"^{re.escape(kind)}\s*:\s*(.*)$") if kind else None

    items = []
    current = None
    for lineno, line in rows:
        match = NUMBERED_RE.match(line)
        if match:
            name = match.group(2).strip()
            if prefix is not None:
                kind_match = prefix.match(name)
                if not kind_match:
                    current = None
                    continue
                name = kind_match.group(1).strip()
            current = {"number": int(match.group(1)), "name": name, "line": lineno, "rows": []}
            items.append(current)
        elif current is not None:
            current["rows"].append((lineno, line))

    return [
        NumberedItem(
            number=item["number"],
            name=item["name"],
            line=item["line"],
            fields=parse_fields(item["rows"]),
            rows=tuple(item["rows"]),
        )
        for item in items
    ]


def lo_references(text: str) -> List[str]:
    return [f"LO-{n}" for n in LO_REF_RE.findall(text or "")]


def is_title_case(name: str) -> bool:
    """Each word capitalised; short connecting words may stay lower case after the first word."""
    words = [w for w in re.split(r"\s+", name.strip()) if w]
    if not words:
        return False
    for position, word in enumerate(words):
        first = word[0]
        if not first.isalpha():
            continue
        if first.isupper():
            continue
        if position > 0 and word in MINOR_WORDS:
            continue
        return False
    return True


def is_sequential(numbers: Sequence[int]) -> bool:
    """True for 1, 2, ..., n (and for an empty sequence)."""
    return list(numbers) == list(range(1, len(numbers) + 1))


def normalize_label(label: str) -> str:
    return re.sub(r"[^a-z0-9]", "", label.lower())


def split_list(value: str) -> List[str]:
    """Split a comma separated field value into trimmed, non-empty parts."""
    return [part.strip() for part in value.split(",") if part.strip()]


def missing_sections(headers: Sequence[Tuple[str, int]], required: Sequence[str]) -> List[Tuple[str, Optional[str], Optional[int]]]:
    """
    Required labels with no exactly matching header.

    Each entry is (label, near_miss, lineno); near_miss is a header that differs
    only in case, spacing or punctuation, or None.
    """
    present = {label for label, _ in headers}
    missing = []
    for label in required:
        if label in present:
            continue
        near, lineno = next(
            ((found, line) for found, line in headers if normalize_label(found) == normalize_label(label)),
            (None, None),
        )
        missing.append((label, near, lineno))
    return missing


def order_violation(headers: Sequence[Tuple[str, int]], order: Sequence[str]) -> Optional[Tuple[List[str], List[str], int]]:
    """
    Compare the first occurrence of each known label against the required order.

    Returns None when the order holds, else (found_labels, expected_labels,
    lineno of the first header out of place).
    """
    found: List[Tuple[str, int]] = []
    for label, lineno in headers:
        if label in order and label not in [f[0] for f in found]:
            found.append((label, lineno))

    expected = sorted(found, key=lambda item: order.index(item[0]))
    if found == expected:
        return None
    first_wrong = next(f for f, e in zip(found, expected) if f != e)
    return [f[0] for f in found], [e[0] for e in expected], first_wrong[1]
