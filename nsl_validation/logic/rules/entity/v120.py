"""Validate that every entity carries a data classification"""

from ..base import EntityRule
from ...extractors.entity import entity_index, extract_classified_entities, split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Data classification must be properly defined"

    def run(self) -> tuple:
        text = self.document.text
        classified = extract_classified_entities(text)
        missing = [block for block in entity_index(split_entity_blocks(text)).values()
                   if block.name not in classified]

        if missing:
            return self.failed(
                "The following entities are missing data classifications: "
                + ", ".join(block.name for block in missing),
                [block.line for block in missing],
            )
        return ("PASS", "")
