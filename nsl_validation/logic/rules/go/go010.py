"""
Rule GO010: Objective header

The first non-blank line of the output must open the document with
"Global Objective: <name>".
"""

import re

from ..base import ProcessRule
from ...extractors.lines import numbered_lines

HEADER_RE = re.compile(r"^\s*(?:#{1,6}\s*)?Global Objective\s*:\s*\S")


class Rule(ProcessRule):
    def description(self) -> str:
        return "Document must open with 'Global Objective: <name>'"

    def run(self) -> tuple:
        for lineno, line in numbered_lines(self.document.text):
            if not line.strip():
                continue
            if HEADER_RE.match(line):
                return ("PASS", "")
            return self.failed(
                f"Expected 'Global Objective: <name>' as the first line, found: {line.strip()}",
                [lineno],
            )
        return self.failed("Expected 'Global Objective: <name>' as the first line, found an empty document", [1])
