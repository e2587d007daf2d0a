"""Tenant definition extractors: roles, departments, access rights, hierarchy chains, cycle detection."""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .lines import numbered_lines
from .sections import (
    Field,
    NumberedItem,
    Row,
    Section,
    find_section_headers,
    get_section,
    parse_numbered_items,
    parse_preamble,
    split_sections,
)

ROLES = "Roles"
DEPARTMENTS = "Departments"
ACCESS_RIGHTS = "Access Rights"
HIERARCHY = "Organizational Hierarchy"

ACCESS_RIGHT_RE = re.compile(r"^\s*-\s*([^:]+?)\s*:\s*(.+)$")
GRANT_RE = re.compile(r"^\s*([A-Za-z][A-Za-z0-9_]*)\s*\(([^)]*)\)\s*$")
HIERARCHY_RE = re.compile(r"^\s*-\s*(.+>.+)$")


@dataclass(frozen=True)
class Grant:
    entity: str
    verbs: Tuple[str, ...]
    well_formed: bool = True


@dataclass(frozen=True)
class AccessRight:
    role: str
    grants: Tuple[Grant, ...]
    line: int


@dataclass(frozen=True)
class HierarchyChain:
    names: Tuple[str, ...]
    line: int


def parse_access_rights(rows: Sequence[Row]) -> List[AccessRight]:
    """"- Role: Entity (Verb, Verb); Entity (Verb)" lines."""
    rights = []
    for lineno, line in rows:
        match = ACCESS_RIGHT_RE.match(line)
        if not match:
            continue
        grants = []
        for chunk in match.group(2).split(";"):
            if not chunk.strip():
                continue
            grant = GRANT_RE.match(chunk)
            if grant:
                verbs = tuple(v.strip() for v in grant.group(2).split(",") if v.strip())
                grants.append(Grant(grant.group(1), verbs))
            else:
                grants.append(Grant(chunk.strip(), (), well_formed=False))
        rights.append(AccessRight(match.group(1).strip(), tuple(grants), lineno))
    return rights


def parse_hierarchy(rows: Sequence[Row]) -> List[HierarchyChain]:
    """"- Top > Middle > Bottom" lines."""
    chains = []
    for lineno, line in rows:
        match = HIERARCHY_RE.match(line)
        if match:
            names = tuple(part.strip() for part in match.group(1).split(">") if part.strip())
            chains.append(HierarchyChain(names, lineno))
    return chains


def find_cycles(edges: Dict[str, List[str]]) -> List[List[str]]:
    """
    Find cycles in a directed graph given as node -> successors.

    Each cycle is reported once, as the path from its first-visited node back
    to itself (e.g. ["A", "B", "A"]). Node order follows dict order, so the
    result is deterministic.
    """
    cycles = []
    seen_cycles = set()
    state: Dict[str, int] = {}  # 1 = on stack, 2 = done

    def visit(node: str, stack: List[str]):
        state[node] = 1
        stack.append(node)
        for successor in edges.get(node, []):
            if state.get(successor) == 1:
                cycle = stack[stack.index(successor):] + [successor]
                key = frozenset(cycle)
                if key not in seen_cycles:
                    seen_cycles.add(key)
                    cycles.append(cycle)
            elif successor not in state:
                visit(successor, stack)
        stack.pop()
        state[node] = 2

    for node in list(edges):
        if node not in state:
            visit(node, [])
    return cycles


@dataclass(frozen=True)
class TenantDocument:
    preamble: Dict[str, Field]
    headers: Tuple[Tuple[str, int], ...]
    sections: Tuple[Section, ...]
    roles: Tuple[NumberedItem, ...]
    departments: Tuple[NumberedItem, ...]
    access_rights: Tuple[AccessRight, ...]
    hierarchy: Tuple[HierarchyChain, ...]

    def section(self, label: str) -> Optional[Section]:
        return get_section(self.sections, label)

    @property
    def role_names(self) -> List[str]:
        return [role.name for role in self.roles]

    @property
    def department_names(self) -> List[str]:
        return [department.name for department in self.departments]


def parse_tenant_document(text: str) -> TenantDocument:
    rows = numbered_lines(text)
    sections = split_sections(rows)

    def body(label):
        section = get_section(sections, label)
        return section.body if section else ()

    return TenantDocument(
        preamble=parse_preamble(rows),
        headers=tuple(find_section_headers(rows)),
        sections=tuple(sections),
        roles=tuple(parse_numbered_items(body(ROLES), kind="Role")),
        departments=tuple(parse_numbered_items(body(DEPARTMENTS), kind="Department")),
        access_rights=tuple(parse_access_rights(body(ACCESS_RIGHTS))),
        hierarchy=tuple(parse_hierarchy(body(HIERARCHY))),
    )
