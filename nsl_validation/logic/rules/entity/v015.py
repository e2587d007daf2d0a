"""Validate that each entity is declared once"""

from ..base import EntityRule
from ...extractors.entity import split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Entity names must be declared only once"

    def run(self) -> tuple:
        seen = set()
        duplicates = []
        lines = []
        for block in split_entity_blocks(self.document.text):
            if block.name in seen:
                if block.name not in duplicates:
                    duplicates.append(block.name)
                lines.append(block.line)
            seen.add(block.name)

        if duplicates:
            return self.failed(f"Entities declared more than once: {', '.join(duplicates)}", lines)
        return ("PASS", "")
