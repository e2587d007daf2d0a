"""
Global objective (process) extractors.

Layout handled here:

    Process Flow:
    1. LO-1 [HUMAN]: Submit Loan Application
       - Actor: Loan Officer
       - Route: LO-2

    Alternate Pathways:
    Pathway: Rejection
    1. LO-3 [HUMAN]: Reject Application

    Business Rules:
    1. BR-1: Loan amount must be positive. Enforced by LO-1
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .lines import numbered_lines
from .sections import (
    Field,
    Row,
    Section,
    find_section_headers,
    get_section,
    lo_references,
    parse_fields,
    parse_preamble,
    split_sections,
)

PROCESS_FLOW = "Process Flow"
ALTERNATE_PATHWAYS = "Alternate Pathways"

STEP_RE = re.compile(r"^\s*(\d+)\.\s*(LO-(\d+))\b\s*(?:\[([A-Za-z_]+)\])?\s*:?\s*(.*)$")
PATHWAY_RE = re.compile(r"^\s*Pathway\s*:\s*(.+)$")
BUSINESS_RULE_RE = re.compile(r"^\s*(\d+)\.\s*BR-(\d+)\s*:\s*(.*)$")
ENFORCED_BY_RE = re.compile(r"Enforced by:?\s*(LO-\d+)")
INTEGRATION_RE = re.compile(r"^\s*-\s*([^:]+?)\s*:\s*(.*)$")
ROUTE_TOKEN_RE = re.compile(r"\bLO-\d+\b|\bEND\b")


@dataclass(frozen=True)
class Step:
    number: int
    lo_id: str
    lo_number: int
    actor_type: Optional[str]
    name: str
    line: int
    fields: Dict[str, Field] = field(default_factory=dict)

    def route_targets(self) -> List[str]:
        route = self.fields.get("Route")
        return ROUTE_TOKEN_RE.findall(route.value) if route else []


@dataclass(frozen=True)
class Pathway:
    name: str
    line: int
    steps: Tuple[Step, ...]
    primary: bool = False


@dataclass(frozen=True)
class BusinessRule:
    number: int
    br_number: int
    text: str
    line: int
    enforced_by: Optional[str]
    lo_refs: Tuple[str, ...]


@dataclass(frozen=True)
class IntegrationPoint:
    system: str
    description: str
    line: int
    lo_refs: Tuple[str, ...]


def parse_steps(rows: Sequence[Row]) -> List[Step]:
    collected = []
    current = None
    for lineno, line in rows:
        match = STEP_RE.match(line)
        if match:
            current = {"match": match, "line": lineno, "rows": []}
            collected.append(current)
        elif current is not None:
            current["rows"].append((lineno, line))

    steps = []
    for item in collected:
        match = item["match"]
        steps.append(
            Step(
                number=int(match.group(1)),
                lo_id=match.group(2),
                lo_number=int(match.group(3)),
                actor_type=match.group(4),
                name=match.group(5).strip(),
                line=item["line"],
                fields=parse_fields(item["rows"]),
            )
        )
    return steps


def parse_pathways(sections: Sequence[Section]) -> List[Pathway]:
    """The Process Flow pathway (primary) followed by each alternate pathway."""
    pathways = []
    flow = get_section(sections, PROCESS_FLOW)
    if flow is not None:
        pathways.append(Pathway("Process Flow", flow.line, tuple(parse_steps(flow.body)), primary=True))

    alternates = get_section(sections, ALTERNATE_PATHWAYS)
    if alternates is None:
        return pathways

    name, line, rows = None, 0, []
    for lineno, text in alternates.body:
        match = PATHWAY_RE.match(text)
        if match:
            if name is not None:
                pathways.append(Pathway(name, line, tuple(parse_steps(rows))))
            name, line, rows = match.group(1).strip(), lineno, []
        elif name is not None:
            rows.append((lineno, text))
    if name is not None:
        pathways.append(Pathway(name, line, tuple(parse_steps(rows))))
    return pathways


def declared_lo_ids(pathways: Sequence[Pathway]) -> List[str]:
    """LO ids declared by the primary pathway, in order."""
    for pathway in pathways:
        if pathway.primary:
            return [step.lo_id for step in pathway.steps]
    return []


def parse_business_rules(rows: Sequence[Row]) -> List[BusinessRule]:
    collected = []
    for lineno, line in rows:
        match = BUSINESS_RULE_RE.match(line)
        if match:
            collected.append({"match": match, "line": lineno, "text": [match.group(3).strip()]})
        elif collected and line.strip():
            collected[-1]["text"].append(line.strip())

    rules = []
    for item in collected:
        text = " ".join(t for t in item["text"] if t)
        enforced = ENFORCED_BY_RE.search(text)
        rules.append(
            BusinessRule(
                number=int(item["match"].group(1)),
                br_number=int(item["match"].group(2)),
                text=text,
                line=item["line"],
                enforced_by=enforced.group(1) if enforced else None,
                lo_refs=tuple(lo_references(text)),
            )
        )
    return rules


def parse_integration_points(rows: Sequence[Row]) -> List[IntegrationPoint]:
    points = []
    for lineno, line in rows:
        match = INTEGRATION_RE.match(line)
        if match:
            description = match.group(2).strip()
            points.append(
                IntegrationPoint(match.group(1).strip(), description, lineno, tuple(lo_references(description)))
            )
    return points


@dataclass(frozen=True)
class ProcessDocument:
    """A global objective document split into preamble, sections and pathways."""

    preamble: Dict[str, Field]
    headers: Tuple[Tuple[str, int], ...]
    sections: Tuple[Section, ...]
    pathways: Tuple[Pathway, ...]

    def section(self, label: str) -> Optional[Section]:
        return get_section(self.sections, label)

    def section_fields(self, label: str) -> Dict[str, Field]:
        section = self.section(label)
        return parse_fields(section.body) if section else {}

    @property
    def declared_lo_ids(self) -> List[str]:
        return declared_lo_ids(self.pathways)

    @property
    def steps(self) -> List[Step]:
        return [step for pathway in self.pathways for step in pathway.steps]


def parse_process_document(text: str) -> ProcessDocument:
    rows = numbered_lines(text)
    sections = split_sections(rows)
    return ProcessDocument(
        preamble=parse_preamble(rows),
        headers=tuple(find_section_headers(rows)),
        sections=tuple(sections),
        pathways=tuple(parse_pathways(sections)),
    )
