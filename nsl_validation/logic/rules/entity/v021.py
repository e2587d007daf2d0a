"""
Rule V021: Relationship references

Both ends of a relationship must be declared entities, and the entity
prefixes in its "using A.x to B.y" clause must match the relationship's own
source and target.
"""

from ..base import EntityRule
from ...extractors.entity import entity_index, extract_relationships, split_entity_blocks


class Rule(EntityRule):
    def description(self) -> str:
        return "Relationships must reference existing entities and attributes"

    def run(self) -> tuple:
        text = self.document.text
        declared = entity_index(split_entity_blocks(text))

        problems = []
        lines = []
        for rel in extract_relationships(text):
            found = []
            if rel.source not in declared:
                found.append(f"Source entity {rel.source} not defined")
            if rel.target not in declared:
                found.append(f"Target entity {rel.target} not defined")
            if rel.source_ref is not None and rel.source_ref.entity != rel.source:
                found.append(
                    f"Source attribute entity {rel.source_ref.entity} doesn't match relationship source {rel.source}"
                )
            if rel.target_ref is not None and rel.target_ref.entity != rel.target:
                found.append(
                    f"Target attribute entity {rel.target_ref.entity} doesn't match relationship target {rel.target}"
                )
            if found:
                problems.extend(found)
                lines.append(rel.line)

        if problems:
            return self.failed(
                f"Invalid entity/attribute references in relationships: {'; '.join(problems)}",
                lines,
            )
        return ("PASS", "")
