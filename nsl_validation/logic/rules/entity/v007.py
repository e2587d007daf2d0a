"""
Rule V007: Reference list shape

Auxiliary reference lists are optional, but when a caller supplies one it
must be an array of non-empty strings. Malformed lists are ignored by the
rules that consume them, so this rule is where the caller hears about it.
"""

from ..base import EntityRule, check_reference_fields


class Rule(EntityRule):
    def description(self) -> str:
        return "Supplied reference lists must be arrays of strings"

    def run(self) -> tuple:
        return check_reference_fields(self.document)
