"""
Rule V041: Property targets

A DEFAULT_VALUE (or any other non-naming) property must point at an
attribute that the entity actually declares. PROPERTY_NAME may introduce a
new display name, so it is exempt.
"""

from ..base import EntityRule
from ...extractors.entity import entity_index, extract_properties, split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Properties must target declared entity attributes"

    def run(self) -> tuple:
        text = self.document.text
        entities = entity_index(split_entity_blocks(text))

        unknown = []
        lines = []
        for prop in extract_properties(text):
            if prop.kind == "PROPERTY_NAME":
                continue
            block = entities.get(prop.entity)
            if block is None:
                unknown.append(f"{prop.entity}.{prop.attribute} (entity not declared)")
                lines.append(prop.line)
            elif block.attribute(prop.attribute) is None:
                unknown.append(f"{prop.entity}.{prop.attribute}")
                lines.append(prop.line)

        if unknown:
            return self.failed(f"Properties reference undeclared attributes: {', '.join(unknown)}", lines)
        return ("PASS", "")
