"""Validate entity additional properties blocks"""

from ..base import EntityRule
from ...extractors.blocks import extract_labeled_blocks, missing_labels

LABEL = "Entity Additional Properties:"
REQUIRED_PARTS = ("Display Name", "Type", "Description")


class Rule(EntityRule):
    def description(self) -> str:
        return "Entity additional properties must be properly defined"

    def run(self) -> tuple:
        incomplete = []
        lines = []
        for block in extract_labeled_blocks(self.document.text, LABEL):
            missing = missing_labels(block.text, REQUIRED_PARTS)
            if missing:
                identifier = f"{LABEL} {block.heading}".strip()
                incomplete.append(f"{identifier} missing: {', '.join(missing)}")
                lines.append(block.line)

        if incomplete:
            return self.failed(f"Incomplete entity additional properties: {'; '.join(incomplete)}", lines)
        return ("PASS", "")
