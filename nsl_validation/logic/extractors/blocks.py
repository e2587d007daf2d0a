"""
Annotation-block extractor.

The notation has no closing delimiters, so a labelled block ends at the first
blank line, at the next line that opens any recognised block, or at the end
of the document. BLOCK_LABELS is that boundary set; add new labels here.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .lines import numbered_lines


BLOCK_LABELS = (
    "Entity Additional Properties:",
    "Attribute Additional Properties:",
    "Relationship Properties:",
    "Relationship:",
    "CalculatedField for",
    "* Synthetic:",
    "* Workflow:",
    "* Archive Strategy for",
    "* Purge Rule for",
    "BusinessRule",
)


@dataclass(frozen=True)
class LabeledBlock:
    label: str
    heading: str
    text: str
    line: int
    body: Tuple[Tuple[int, str], ...]


def _opens_block(stripped: str) -> bool:
    return any(stripped.startswith(label) for label in BLOCK_LABELS)


def extract_labeled_blocks(text: str, label: str, stop_at_bullet: bool = False) -> List[LabeledBlock]:
    """
    Collect every block opened by a line starting with label.

    Args:
        text: Document output text
        label: Block label, e.g. "Entity Additional Properties:"
        stop_at_bullet: Also end the block at the next "*" bullet line

    Returns:
        Blocks in document order; heading is whatever follows the label on
        the opening line.
    """
    rows = numbered_lines(text)
    blocks = []
    index = 0
    while index < len(rows):
        lineno, line = rows[index]
        stripped = line.strip()
        if not stripped.startswith(label):
            index += 1
            continue

        body = []
        cursor = index + 1
        while cursor < len(rows):
            candidate = rows[cursor][1].strip()
            if not candidate or _opens_block(candidate):
                break
            if stop_at_bullet and candidate.startswith("*"):
                break
            body.append(rows[cursor])
            cursor += 1

        block_text = "\n".join([line] + [row[1] for row in body])
        blocks.append(
            LabeledBlock(
                label=label,
                heading=stripped[len(label):].strip(),
                text=block_text,
                line=lineno,
                body=tuple(body),
            )
        )
        index = cursor
    return blocks


def missing_labels(block_text: str, names: Iterable[str], prefix: str = "") -> List[str]:
    """Names whose "<prefix><name>:" marker does not occur in block_text."""
    return [name for name in names if f"{prefix}{name}:" not in block_text]


def preceding_line(text: str, before: int, prefix: str) -> Optional[str]:
    """Closest line above line number `before` whose stripped text starts with prefix."""
    found = None
    for lineno, line in numbered_lines(text):
        if lineno >= before:
            break
        if line.strip().startswith(prefix):
            found = line.strip()
    return found
