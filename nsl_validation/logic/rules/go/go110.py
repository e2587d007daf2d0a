import re

from ..base import ProcessRule
from ...extractors.process import parse_process_document

PASCAL_CASE_RE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")


class Rule(ProcessRule):
    def description(self) -> str:
        return "Primary Entity must be PascalCase"

    def run(self) -> tuple:
        entity = parse_process_document(self.document.text).section_fields("Core Metadata").get("Primary Entity")
        if entity is None or not entity.value or PASCAL_CASE_RE.match(entity.value):
            return ("PASS", "")
        return self.failed(f"Primary Entity is not in PascalCase: {entity.value}", [entity.line])
