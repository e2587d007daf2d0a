"""
Rule GO020: Required sections

Every required section must appear with its exact label. When a header
differs from a required label only in case, spacing or punctuation it is
reported as a near miss so the author can see what to rename.
"""

from ..base import ProcessRule
from ...extractors.process import parse_process_document
from ...extractors.sections import missing_sections

REQUIRED_SECTIONS = (
    "Core Metadata",
    "Process Ownership",
    "Trigger Definition",
    "Process Flow",
    "Business Rules",
    "Integration Points",
    "Performance Metadata",
)


class Rule(ProcessRule):
    def description(self) -> str:
        return "All required sections must be present with exact labels"

    def run(self) -> tuple:
        missing = missing_sections(parse_process_document(self.document.text).headers, REQUIRED_SECTIONS)
        if missing:
            listed = [f"{label} (found '{near}')" if near else label for label, near, _ in missing]
            return self.failed(
                f"Missing required sections: {', '.join(listed)}",
                [lineno for _, _, lineno in missing],
            )
        return ("PASS", "")
