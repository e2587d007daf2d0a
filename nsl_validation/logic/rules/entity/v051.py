"""Validate that validation statements point at declared attributes"""

from ..base import EntityRule
from ...extractors.entity import entity_index, extract_validation_statements, split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Validation rules must reference declared attributes"

    def run(self) -> tuple:
        text = self.document.text
        entities = entity_index(split_entity_blocks(text))

        unknown = []
        lines = []
        for statement in extract_validation_statements(text):
            ref = statement.ref
            if ref is None:
                continue
            block = entities.get(ref.entity)
            if block is None or block.attribute(ref.attribute) is None:
                unknown.append(str(ref))
                lines.append(statement.line)

        if unknown:
            return self.failed(f"Validation rules reference undeclared attributes: {', '.join(unknown)}", lines)
        return ("PASS", "")
