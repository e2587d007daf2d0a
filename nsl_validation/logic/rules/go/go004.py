"""Validate the shape of any supplied reference lists"""

from ..base import ProcessRule, check_reference_fields


class Rule(ProcessRule):
    def description(self) -> str:
        return "Supplied reference lists must be arrays of strings"

    def run(self) -> tuple:
        return check_reference_fields(self.document)
