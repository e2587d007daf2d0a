from ..base import ProcessRule
from ...extractors.process import parse_process_document

REQUIRED_FIELDS = ("Name", "Version", "Status", "Description", "Primary Entity", "Business Function")


class Rule(ProcessRule):
    def description(self) -> str:
        return "Core Metadata must contain all required fields"

    def run(self) -> tuple:
        section = parse_process_document(self.document.text).section("Core Metadata")
        return self.require_fields(section, REQUIRED_FIELDS)
