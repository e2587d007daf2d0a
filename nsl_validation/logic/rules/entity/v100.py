"""
Rule V100: Relationship properties

A "Relationship Properties:" block must state On Delete, On Update and
Foreign Key Type. The relationship it describes is named either inside the
block or by the closest "Relationship:" line above it.
"""

import re

from ..base import EntityRule
from ...extractors.blocks import extract_labeled_blocks, missing_labels, preceding_line

RELATIONSHIP_NAME_RE = re.compile(r"Relationship:\s*([A-Za-z0-9_]+ to [A-Za-z0-9_]+)")
REQUIRED_PARTS = ("On Delete", "On Update", "Foreign Key Type")


class Rule(EntityRule):
    def description(self) -> str:
        return "Relationship properties must be properly defined"

    def run(self) -> tuple:
        text = self.document.text
        incomplete = []
        lines = []
        for block in extract_labeled_blocks(text, "Relationship Properties:"):
            missing = missing_labels(block.text, REQUIRED_PARTS)
            if not missing:
                continue
            match = RELATIONSHIP_NAME_RE.search(block.text)
            if match is None:
                above = preceding_line(text, block.line, "Relationship:")
                match = RELATIONSHIP_NAME_RE.search(above) if above else None
            identifier = (
                f"Relationship properties for {match.group(1)}" if match else "Relationship properties"
            )
            incomplete.append(f"{identifier} missing: {', '.join(missing)}")
            lines.append(block.line)

        if incomplete:
            return self.failed(f"Incomplete relationship properties: {'; '.join(incomplete)}", lines)
        return ("PASS", "")
