"""Validate that the output defines at least one entity"""

from ..base import EntityRule
from ...extractors.entity import has_entity_definition


class Rule(EntityRule):
    def description(self) -> str:
        return "Output structure must be properly defined"

    def run(self) -> tuple:
        if not has_entity_definition(self.document.text):
            return self.failed(
                "No entity definitions found. Each entity should start with 'EntityName has attribute...'",
                [1],
            )
        return ("PASS", "")
