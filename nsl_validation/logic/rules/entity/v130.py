"""Validate workflow definitions"""

import re

from ..base import EntityRule
from ...extractors.blocks import extract_labeled_blocks, missing_labels

WORKFLOW_NAME_RE = re.compile(r"^([a-zA-Z0-9_]+) for ([A-Z][a-zA-Z0-9_]*)")
REQUIRED_PARTS = ("States", "Transitions", "Actions")


class Rule(EntityRule):
    def description(self) -> str:
        return "Workflow definitions must be properly structured"

    def run(self) -> tuple:
        incomplete = []
        lines = []
        for block in extract_labeled_blocks(self.document.text, "* Workflow:", stop_at_bullet=True):
            match = WORKFLOW_NAME_RE.match(block.heading)
            name = f"{match.group(1)} for {match.group(2)}" if match else "Unknown workflow"
            missing = missing_labels(block.text, REQUIRED_PARTS, prefix="- ")
            if missing:
                incomplete.append(f"{name} missing: {', '.join(missing)}")
                lines.append(block.line)

        if incomplete:
            return self.failed(f"Incomplete workflow definitions: {'; '.join(incomplete)}", lines)
        return ("PASS", "")
