"""Validate relationship cardinality"""

from ..base import EntityRule
from ...extractors.entity import VALID_CARDINALITIES, extract_relationships


class Rule(EntityRule):
    def description(self) -> str:
        return "Relationship types must be valid"

    def run(self) -> tuple:
        invalid = []
        lines = []
        for rel in extract_relationships(self.document.text):
            if rel.cardinality not in VALID_CARDINALITIES:
                invalid.append(rel.cardinality)
                lines.append(rel.line)

        if invalid:
            return self.failed(
                f"Invalid relationship types found: {', '.join(invalid)}. "
                f"Valid types are: {', '.join(VALID_CARDINALITIES)}.",
                lines,
            )
        return ("PASS", "")
