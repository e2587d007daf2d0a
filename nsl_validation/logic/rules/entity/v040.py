"""Validate property kinds"""

from ..base import EntityRule
from ...extractors.entity import extract_properties

VALID_KINDS = ("PROPERTY_NAME", "DEFAULT_VALUE")


class Rule(EntityRule):
    def description(self) -> str:
        return "Property types must be valid"

    def run(self) -> tuple:
        invalid = [p for p in extract_properties(self.document.text) if p.kind not in VALID_KINDS]
        if invalid:
            listed = ", ".join(f"{p.entity}.{p.attribute}: {p.kind}" for p in invalid)
            return self.failed(
                f"Invalid property types found: {listed}. Valid types are: {', '.join(VALID_KINDS)}.",
                [p.line for p in invalid],
            )
        return ("PASS", "")
