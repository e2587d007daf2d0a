"""Validate that the attributes named in a using clause exist"""

from ..base import EntityRule
from ...extractors.entity import entity_index, extract_relationships, split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Relationship attributes must be declared on their entities"

    def run(self) -> tuple:
        text = self.document.text
        entities = entity_index(split_entity_blocks(text))

        missing = []
        lines = []
        for rel in extract_relationships(text):
            for ref in (rel.source_ref, rel.target_ref):
                if ref is None:
                    continue
                block = entities.get(ref.entity)
                # Undeclared entities are reported by V021
                if block is not None and block.attribute(ref.attribute) is None:
                    missing.append(str(ref))
                    lines.append(rel.line)

        if missing:
            return self.failed(f"Relationship attributes not declared: {', '.join(missing)}", lines)
        return ("PASS", "")
