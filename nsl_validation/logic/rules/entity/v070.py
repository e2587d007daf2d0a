"""Validate calculated field blocks"""

import re

from ..base import EntityRule
from ...extractors.blocks import extract_labeled_blocks, missing_labels

FIELD_NAME_RE = re.compile(r"^([A-Z][A-Za-z0-9_]*\.[A-Za-z0-9_]+):")
REQUIRED_PARTS = ("Formula", "Logic Layer", "Dependencies")


class Rule(EntityRule):
    def description(self) -> str:
        return "Calculated fields must have formula, logic layer, and dependencies"

    def run(self) -> tuple:
        incomplete = []
        lines = []
        for block in extract_labeled_blocks(self.document.text, "CalculatedField for"):
            match = FIELD_NAME_RE.match(block.heading)
            name = match.group(1) if match else "Unknown field"
            missing = missing_labels(block.text, REQUIRED_PARTS, prefix="* ")
            if missing:
                incomplete.append(f"{name} missing: {', '.join(missing)}")
                lines.append(block.line)

        if incomplete:
            return self.failed(f"Incomplete calculated field definitions: {'; '.join(incomplete)}", lines)
        return ("PASS", "")
