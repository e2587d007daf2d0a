"""Validate that the document carries both input and output."""

from ..base import LocalObjectiveRule, check_fields_present


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Must have both input and output fields"

    def run(self) -> tuple:
        return check_fields_present(self.document)
