"""Validate attribute uniqueness within each entity"""

from ..base import EntityRule
from ...extractors.entity import split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Attribute names must be unique within an entity"

    def run(self) -> tuple:
        duplicates = []
        lines = []
        for block in split_entity_blocks(self.document.text):
            seen = set()
            for name in block.attribute_names:
                if name in seen:
                    label = f"{block.name}.{name}"
                    if label not in duplicates:
                        duplicates.append(label)
                        lines.append(block.line)
                seen.add(name)

        if duplicates:
            return self.failed(f"Attributes declared more than once: {', '.join(duplicates)}", lines)
        return ("PASS", "")
