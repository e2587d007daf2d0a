"""Validate the output notation"""

from ..base import EntityRule, check_non_empty_string


class Rule(EntityRule):
    def description(self) -> str:
        return "Output must be non-empty string"

    def run(self) -> tuple:
        return check_non_empty_string(self.document, "output")
