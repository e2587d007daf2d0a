"""
Rule V005: Master entity list

Every declared entity must appear in the caller's master entity list. The
list is only known to the caller; without it the rule makes no claim.
"""

from ..base import EntityRule
from ...extractors.entity import split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Declared entities must exist in the master entity list"

    def required_data(self) -> list:
        return ["master_entities"]

    def run(self) -> tuple:
        master = self.reference.get("master_entities")
        if master is None:
            return self.skipped("Master entity list")

        known = set(master)
        unknown = [b for b in split_entity_blocks(self.document.text) if b.name not in known]
        if unknown:
            return self.failed(
                f"Entities not found in the master entity list: {', '.join(b.name for b in unknown)}",
                [b.line for b in unknown],
            )
        return ("PASS", "")
