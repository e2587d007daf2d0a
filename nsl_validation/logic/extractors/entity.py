"""
Entity notation extractors.

Every rule in the entity family goes through these functions so that block
boundaries, attribute names and relationship facts are identical across
rules. All functions are total: unmatched input gives empty results.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .lines import line_of_offset, numbered_lines


ENTITY_HEADER_RE = re.compile(r"^([A-Z][A-Za-z0-9_]+) has (.+)$")
HEADER_CANDIDATE_RE = re.compile(r"^([A-Za-z][A-Za-z0-9_]*) has (.*)$")
LOOSE_DEFINITION_RE = re.compile(r"[A-Z][a-zA-Z]+ has [a-zA-Z]")

# "Loan has loanId = L-1, ..." is a sample data row, not a definition.
ASSIGNMENT_RE = re.compile(r"^\s*[A-Za-z][A-Za-z0-9_]*\s*=")

MARKER_RE = re.compile(r"\^PK|\^FK|\[derived\]|\[info\]|\[dependent\]|\[constant\]")
ENUM_RE = re.compile(r"\(([^)]*)\)")

RELATIONSHIP_RE = re.compile(
    r"^\s*\*\s*([A-Z][A-Za-z0-9_]*) has ([a-z-]+?-to-[a-z-]+) relationship with ([A-Z][A-Za-z0-9_]*)"
    r"(?:\s+using\s+([A-Z][A-Za-z0-9_]*)\.([A-Za-z0-9_]+)(?:\^[A-Z]{2})?"
    r"\s+to\s+([A-Z][A-Za-z0-9_]*)\.([A-Za-z0-9_]+))?"
)
PROPERTY_RE = re.compile(r"^\s*\*\s*([A-Z][A-Za-z0-9_]*)\.([A-Za-z0-9_]+) ([A-Z_]+) =\s*(.*)$")
STATEMENT_RE = re.compile(r"^\s*\*\s*(.+?)\s+must\b\s*(.*)$")
DOTTED_NAME_RE = re.compile(r"^([A-Z][A-Za-z0-9_]*)\.([A-Za-z0-9_]+)$")
CALCULATED_FIELD_RE = re.compile(r"CalculatedField for ([A-Z][A-Za-z0-9_]*)\.([A-Za-z0-9_]+):")
CLASSIFICATION_RE = re.compile(r"-(Confidential|Internal|Public): ([A-Z][A-Za-z0-9_]*)\.")
OPERATION_RE = re.compile(r"\*Operation: [^*]+\*")
FUNCTION_CALL_RE = re.compile(r"([a-z_]+)\(")

VALID_CARDINALITIES = ("one-to-one", "one-to-many", "many-to-one", "many-to-many")


@dataclass(frozen=True)
class Attribute:
    """One attribute token from an entity header."""

    name: str
    raw: str
    markers: Tuple[str, ...] = ()
    enum_values: Tuple[str, ...] = ()

    @property
    def is_pk(self) -> bool:
        return "^PK" in self.markers

    @property
    def is_fk(self) -> bool:
        return "^FK" in self.markers

    @property
    def is_derived(self) -> bool:
        return "[derived]" in self.markers


@dataclass(frozen=True)
class EntityBlock:
    """A declared entity: its header line plus everything up to the next header."""

    name: str
    attributes: Tuple[Attribute, ...]
    line: int
    header: str
    text: str

    def attribute(self, name: str) -> Optional[Attribute]:
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    @property
    def attribute_names(self) -> List[str]:
        return [a.name for a in self.attributes]


@dataclass(frozen=True)
class AttributeRef:
    entity: str
    attribute: str

    def __str__(self) -> str:
        return f"{self.entity}.{self.attribute}"


@dataclass(frozen=True)
class Relationship:
    source: str
    cardinality: str
    target: str
    source_ref: Optional[AttributeRef]
    target_ref: Optional[AttributeRef]
    line: int
    text: str

    @property
    def foreign_key(self) -> Optional[AttributeRef]:
        """The attribute named before "to" in the using clause, whatever the cardinality."""
        return self.source_ref


@dataclass(frozen=True)
class Property:
    entity: str
    attribute: str
    kind: str
    value: str
    line: int


@dataclass(frozen=True)
class Statement:
    """A "* subject must condition" bullet line."""

    subject: str
    condition: str
    line: int
    text: str

    @property
    def ref(self) -> Optional[AttributeRef]:
        match = DOTTED_NAME_RE.match(self.subject)
        if match:
            return AttributeRef(match.group(1), match.group(2))
        return None


@dataclass(frozen=True)
class Operation:
    text: str
    functions: Tuple[str, ...]
    line: int


def _is_definition(attribute_text: str) -> bool:
    return not ASSIGNMENT_RE.match(attribute_text)


def find_header_candidates(text: str) -> List[Tuple[str, str, int]]:
    """
    Loose scan for "<word> has ..." lines, whatever the case of the word.

    Returns:
        List of (name, line_text, lineno)
    """
    found = []
    for lineno, line in numbered_lines(text):
        match = HEADER_CANDIDATE_RE.match(line)
        if match and _is_definition(match.group(2)):
            found.append((match.group(1), line, lineno))
    return found


def has_entity_definition(text: str) -> bool:
    return bool(LOOSE_DEFINITION_RE.search(text or ""))


def split_attributes(attribute_text: str) -> List[str]:
    """Split on commas that are not inside parentheses; tokens are trimmed."""
    tokens = []
    current = []
    depth = 0
    for char in attribute_text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)

        if char == "," and depth == 0:
            tokens.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    tail = "".join(current).strip()
    if tail:
        tokens.append(tail)
    return tokens


def parse_attribute(token: str) -> Attribute:
    """Reduce an attribute token to its bare name, keeping markers and enum values."""
    markers = tuple(m.group(0) for m in MARKER_RE.finditer(token))

    enum_values: Tuple[str, ...] = ()
    enum_match = ENUM_RE.search(token)
    if enum_match:
        enum_values = tuple(v.strip() for v in enum_match.group(1).split(",") if v.strip())

    name_part = token.split("(")[0] if "(" in token else token
    name = MARKER_RE.sub("", name_part).strip()
    name = re.sub(r"\.$", "", name).strip()
    return Attribute(name=name, raw=token, markers=markers, enum_values=enum_values)


def parse_attribute_list(attribute_text: str) -> List[Attribute]:
    attributes = []
    for token in split_attributes(attribute_text):
        attr = parse_attribute(token)
        if not attr.name or attr.name == "has":
            continue
        attributes.append(attr)
    return attributes


def split_entity_blocks(text: str) -> List[EntityBlock]:
    """Split output text into entity blocks, one per header line."""
    rows = numbered_lines(text)
    headers = []
    for index, (lineno, line) in enumerate(rows):
        match = ENTITY_HEADER_RE.match(line)
        if match and _is_definition(match.group(2)):
            headers.append((index, match))

    blocks = []
    for position, (index, match) in enumerate(headers):
        end = headers[position + 1][0] if position + 1 < len(headers) else len(rows)
        block_text = "\n".join(line for _, line in rows[index:end])
        blocks.append(
            EntityBlock(
                name=match.group(1),
                attributes=tuple(parse_attribute_list(match.group(2))),
                line=rows[index][0],
                header=rows[index][1],
                text=block_text,
            )
        )
    return blocks


def entity_index(blocks: List[EntityBlock]) -> dict:
    """Entity name -> first block declaring it."""
    index = {}
    for block in blocks:
        index.setdefault(block.name, block)
    return index


def extract_relationships(text: str) -> List[Relationship]:
    relationships = []
    for lineno, line in numbered_lines(text):
        match = RELATIONSHIP_RE.match(line)
        if not match:
            continue
        source_ref = target_ref = None
        if match.group(4):
            source_ref = AttributeRef(match.group(4), match.group(5))
            target_ref = AttributeRef(match.group(6), match.group(7))
        relationships.append(
            Relationship(
                source=match.group(1),
                cardinality=match.group(2),
                target=match.group(3),
                source_ref=source_ref,
                target_ref=target_ref,
                line=lineno,
                text=line.strip(),
            )
        )
    return relationships


def extract_properties(text: str) -> List[Property]:
    properties = []
    for lineno, line in numbered_lines(text):
        match = PROPERTY_RE.match(line)
        if match:
            properties.append(
                Property(match.group(1), match.group(2), match.group(3), match.group(4).strip(), lineno)
            )
    return properties


def extract_validation_statements(text: str) -> List[Statement]:
    statements = []
    for lineno, line in numbered_lines(text):
        if RELATIONSHIP_RE.match(line) or PROPERTY_RE.match(line):
            continue
        match = STATEMENT_RE.match(line)
        if match:
            statements.append(Statement(match.group(1).strip(), match.group(2).strip(), lineno, line.strip()))
    return statements


def extract_calculated_field_refs(text: str) -> List[Tuple[AttributeRef, int]]:
    refs = []
    for match in CALCULATED_FIELD_RE.finditer(text or ""):
        refs.append((AttributeRef(match.group(1), match.group(2)), line_of_offset(text, match.start())))
    return refs


def extract_classified_entities(text: str) -> set:
    return {match.group(2) for match in CLASSIFICATION_RE.finditer(text or "")}


def extract_operations(text: str) -> List[Operation]:
    operations = []
    for match in OPERATION_RE.finditer(text or ""):
        functions = tuple(m.group(1) for m in FUNCTION_CALL_RE.finditer(match.group(0)))
        operations.append(Operation(match.group(0), functions, line_of_offset(text, match.start())))
    return operations
