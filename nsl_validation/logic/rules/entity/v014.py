"""Validate that calculated attributes are marked [derived]"""

from ..base import EntityRule
from ...extractors.entity import entity_index, extract_calculated_field_refs, split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Derived attributes must be marked with [derived]"

    def run(self) -> tuple:
        text = self.document.text
        entities = entity_index(split_entity_blocks(text))

        missing = []
        lines = []
        for ref, _line in extract_calculated_field_refs(text):
            owner = entities.get(ref.entity)
            if owner is None:
                continue
            attr = owner.attribute(ref.attribute)
            if attr is None or not attr.is_derived:
                missing.append(str(ref))
                lines.append(owner.line)

        if missing:
            return self.failed(
                f"The following calculated attributes are not marked with [derived]: {', '.join(missing)}",
                lines,
            )
        return ("PASS", "")
