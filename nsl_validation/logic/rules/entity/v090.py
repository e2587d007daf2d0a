"""Validate attribute additional properties blocks"""

import re

from ..base import EntityRule
from ...extractors.blocks import extract_labeled_blocks, missing_labels

ATTRIBUTE_NAME_RE = re.compile(r"Attribute name: ([a-zA-Z0-9_]+)")
REQUIRED_PARTS = (
    "Key",
    "Display Name",
    "DataType",
    "Required",
    "Format",
    "Values",
    "Default",
    "Validation",
    "Error Message",
    "Description",
)


class Rule(EntityRule):
    def description(self) -> str:
        return "Attribute additional properties must be properly defined"

    def run(self) -> tuple:
        incomplete = []
        lines = []
        for block in extract_labeled_blocks(self.document.text, "Attribute Additional Properties:"):
            match = ATTRIBUTE_NAME_RE.search(block.text)
            name = match.group(1) if match else "Unknown attribute"
            missing = missing_labels(block.text, REQUIRED_PARTS)
            if missing:
                incomplete.append(f"{name} missing: {', '.join(missing)}")
                lines.append(block.line)

        if incomplete:
            return self.failed(f"Incomplete attribute additional properties: {'; '.join(incomplete)}", lines)
        return ("PASS", "")
