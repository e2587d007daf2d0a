"""Validate archive strategies"""

import re

from ..base import EntityRule
from ...extractors.blocks import extract_labeled_blocks, missing_labels

ENTITY_NAME_RE = re.compile(r"^([A-Z][A-Za-z0-9_]*):")
REQUIRED_PARTS = ("Trigger", "Criteria", "Retention", "Storage")


class Rule(EntityRule):
    def description(self) -> str:
        return "Archive strategy must be properly defined"

    def run(self) -> tuple:
        incomplete = []
        lines = []
        for block in extract_labeled_blocks(self.document.text, "* Archive Strategy for", stop_at_bullet=True):
            match = ENTITY_NAME_RE.match(block.heading)
            entity = match.group(1) if match else "Unknown entity"
            missing = missing_labels(block.text, REQUIRED_PARTS, prefix="- ")
            if missing:
                incomplete.append(f"{entity} archive strategy missing: {', '.join(missing)}")
                lines.append(block.line)

        if incomplete:
            return self.failed(f"Incomplete archive strategies: {'; '.join(incomplete)}", lines)
        return ("PASS", "")
