"""Validate attribute naming"""

import re

from ..base import EntityRule
from ...extractors.entity import split_entity_blocks

CAMEL_CASE_RE = re.compile(r"^[a-z][a-zA-Z0-9]*$")


class Rule(EntityRule):
    def description(self) -> str:
        return "Attributes must be camelCase"

    def run(self) -> tuple:
        invalid = []
        lines = []
        for block in split_entity_blocks(self.document.text):
            for attr in block.attributes:
                if not CAMEL_CASE_RE.match(attr.name):
                    invalid.append(f"{block.name}.{attr.name}")
                    lines.append(block.line)

        if invalid:
            return self.failed(
                f"The following attributes are not in camelCase: {', '.join(invalid)}",
                lines,
            )
        return ("PASS", "")
