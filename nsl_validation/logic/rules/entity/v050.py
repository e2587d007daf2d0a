"""Validate the shape of "must" statements"""

from ..base import EntityRule
from ...extractors.entity import extract_validation_statements


class Rule(EntityRule):
    def description(self) -> str:
        return "Validation rules must follow proper format"

    def run(self) -> tuple:
        invalid = [
            s for s in extract_validation_statements(self.document.text)
            if s.ref is None or not s.condition
        ]
        if invalid:
            return self.failed(
                f"Invalid validation rule format: {', '.join(s.text for s in invalid)}. "
                "Expected '* Entity.attribute must <condition>'.",
                [s.line for s in invalid],
            )
        return ("PASS", "")
