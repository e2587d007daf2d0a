"""
Rule V010: Entity names PascalCase

Scans every "<name> has ..." line, whatever the case of the name, so that
lower-case entity names are reported rather than silently skipped. Names in
the common-word allow-list (compared case-insensitively) are exempt.
"""

import re

from ..base import EntityRule
from ...extractors.entity import find_header_candidates

PASCAL_CASE_RE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")


class Rule(EntityRule):
    def description(self) -> str:
        return "Entity names must be PascalCase"

    def required_data(self) -> list:
        return ["common_words"]

    def run(self) -> tuple:
        common_words = {w.lower() for w in (self.reference.get("common_words") or [])}

        invalid = []
        lines = []
        for name, _line, lineno in find_header_candidates(self.document.text):
            if name.lower() in common_words:
                continue
            if not PASCAL_CASE_RE.match(name):
                invalid.append(name)
                lines.append(lineno)

        if invalid:
            return self.failed(
                f"The following entity names are not in PascalCase: {', '.join(invalid)}",
                lines,
            )
        return ("PASS", "")
