"""
Rule V013: Foreign key markers

For every relationship with a "using A.x to B.y" clause, the attribute that
carries the foreign key must be marked ^FK in its entity's definition. That
is always the source attribute (A.x), for every cardinality. Relationships
naming undeclared entities are left to V021.
"""

from ..base import EntityRule
from ...extractors.entity import entity_index, extract_relationships, split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Foreign keys must be properly marked with ^FK"

    def run(self) -> tuple:
        text = self.document.text
        entities = entity_index(split_entity_blocks(text))

        missing = []
        lines = []
        for rel in extract_relationships(text):
            ref = rel.foreign_key
            if ref is None:
                continue
            owner = entities.get(ref.entity)
            if owner is None:
                continue
            attr = owner.attribute(ref.attribute)
            if attr is None or not attr.is_fk:
                missing.append(str(ref))
                lines.append(owner.line)

        if missing:
            return self.failed(
                f"The following foreign key attributes are not marked with ^FK: {', '.join(missing)}",
                lines,
            )
        return ("PASS", "")
