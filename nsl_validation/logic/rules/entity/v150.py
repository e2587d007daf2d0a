"""Validate purge rules"""

import re

from ..base import EntityRule
from ...extractors.blocks import extract_labeled_blocks, missing_labels

ENTITY_NAME_RE = re.compile(r"^([A-Z][A-Za-z0-9_]*):")
REQUIRED_PARTS = ("Trigger", "Criteria", "Approvals", "Audit")


class Rule(EntityRule):
    def description(self) -> str:
        return "Purge rule must be properly defined"

    def run(self) -> tuple:
        incomplete = []
        lines = []
        for block in extract_labeled_blocks(self.document.text, "* Purge Rule for", stop_at_bullet=True):
            match = ENTITY_NAME_RE.match(block.heading)
            entity = match.group(1) if match else "Unknown entity"
            missing = missing_labels(block.text, REQUIRED_PARTS, prefix="- ")
            if missing:
                incomplete.append(f"{entity} purge rule missing: {', '.join(missing)}")
                lines.append(block.line)

        if incomplete:
            return self.failed(f"Incomplete purge rules: {'; '.join(incomplete)}", lines)
        return ("PASS", "")
