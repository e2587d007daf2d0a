"""Validate primary key markers"""

from ..base import EntityRule
from ...extractors.entity import split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Primary keys must be properly marked with ^PK"

    def run(self) -> tuple:
        without_pk = [
            block for block in split_entity_blocks(self.document.text)
            if not any(attr.is_pk for attr in block.attributes)
        ]
        if without_pk:
            return self.failed(
                "The following entities do not have a primary key marked with ^PK: "
                + ", ".join(block.name for block in without_pk),
                [block.line for block in without_pk],
            )
        return ("PASS", "")
