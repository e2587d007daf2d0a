"""
Local objective extractors.

A document holds one or more blocks, each opened by an "LO-<n>: Name" line:
a preamble of "Key: value" lines, then sections such as Inputs, Outputs,
System Functions and Execution Pathway.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .lines import numbered_lines
from .sections import (
    Field,
    NumberedItem,
    Section,
    get_section,
    parse_fields,
    parse_numbered_items,
    parse_preamble,
    split_sections,
)

LO_HEADER_RE = re.compile(r"^\s*(?:#{1,6}\s*)?LO-(\d+)\s*:\s*(.*)$")
PATHWAY_TOKEN_RE = re.compile(r"\bLO-\d+\b|\bEND\b")
DOTTED_ATTRIBUTE_RE = re.compile(r"^([A-Z][A-Za-z0-9_]*)\.([a-z][A-Za-z0-9_]*)\b")

INPUTS = "Inputs"
OUTPUTS = "Outputs"
SYSTEM_FUNCTIONS = "System Functions"
EXECUTION_PATHWAY = "Execution Pathway"
BUSINESS_RULES = "Business Rules"


@dataclass(frozen=True)
class LocalObjective:
    lo_id: str
    number: int
    name: str
    line: int
    preamble: Dict[str, Field]
    sections: Tuple[Section, ...]

    def section(self, label: str) -> Optional[Section]:
        return get_section(self.sections, label)

    def field(self, key: str) -> Optional[Field]:
        return self.preamble.get(key)


def split_local_objectives(text: str) -> List[LocalObjective]:
    rows = numbered_lines(text)
    starts = [index for index, (_, line) in enumerate(rows) if LO_HEADER_RE.match(line)]

    objectives = []
    for position, start in enumerate(starts):
        end = starts[position + 1] if position + 1 < len(starts) else len(rows)
        lineno, header = rows[start]
        match = LO_HEADER_RE.match(header)
        body = rows[start + 1:end]
        objectives.append(
            LocalObjective(
                lo_id=f"LO-{match.group(1)}",
                number=int(match.group(1)),
                name=match.group(2).strip(),
                line=lineno,
                preamble=parse_preamble(body),
                sections=tuple(split_sections(body)),
            )
        )
    return objectives


def pathway_targets(objective: LocalObjective) -> List[Tuple[str, int]]:
    """(target, lineno) for every LO id or END named in the Execution Pathway."""
    section = objective.section(EXECUTION_PATHWAY)
    if section is None:
        return []
    targets = []
    for entry in parse_fields(section.body).values():
        for token in PATHWAY_TOKEN_RE.findall(entry.value):
            targets.append((token, entry.line))
    return targets


def dotted_attribute(item_name: str) -> Optional[Tuple[str, str]]:
    """("Loan", "loanAmount") for "Loan.loanAmount (required)", else None."""
    match = DOTTED_ATTRIBUTE_RE.match(item_name.strip())
    if match:
        return match.group(1), match.group(2)
    return None


def section_items(objective: LocalObjective, label: str) -> List[NumberedItem]:
    """Numbered items of one of the objective's sections; empty when the section is absent."""
    section = objective.section(label)
    return parse_numbered_items(section.body) if section else []
