"""Validate section order"""

from ..base import ProcessRule
from ...extractors.process import parse_process_document
from ...extractors.sections import order_violation

SECTION_ORDER = (
    "Core Metadata",
    "Process Ownership",
    "Trigger Definition",
    "Process Flow",
    "Alternate Pathways",
    "Business Rules",
    "Integration Points",
    "Performance Metadata",
)


class Rule(ProcessRule):
    def description(self) -> str:
        return "Sections must appear in the required order"

    def run(self) -> tuple:
        violation = order_violation(parse_process_document(self.document.text).headers, SECTION_ORDER)
        if violation is None:
            return ("PASS", "")
        found, expected, lineno = violation
        return self.failed(
            f"Sections out of order: found {', '.join(found)}; expected {', '.join(expected)}",
            [lineno],
        )
