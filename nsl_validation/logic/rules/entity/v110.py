"""Validate synthetic sample data lines"""

import re

from ..base import EntityRule
from ...extractors.blocks import extract_labeled_blocks

SAMPLE_ROW_RE = re.compile(r"[A-Z][a-zA-Z0-9_]* has [a-zA-Z0-9_]+ = .+")


class Rule(EntityRule):
    def description(self) -> str:
        return "Sample data must be syntactically correct"

    def run(self) -> tuple:
        invalid = []
        lines = []
        for block in extract_labeled_blocks(self.document.text, "* Synthetic:", stop_at_bullet=True):
            for lineno, line in block.body:
                if line.strip() and not SAMPLE_ROW_RE.search(line):
                    invalid.append(line.strip())
                    lines.append(lineno)

        if invalid:
            return self.failed(f"Invalid synthetic data format: {'; '.join(invalid)}", lines)
        return ("PASS", "")
