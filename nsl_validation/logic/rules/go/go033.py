from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Core Metadata name must match the objective name"

    def run(self) -> tuple:
        doc = parse_process_document(self.document.text)
        header = doc.preamble.get("Global Objective")
        name = doc.section_fields("Core Metadata").get("Name")
        if header is None or name is None or not name.value:
            return ("PASS", "")
        if name.value != header.value:
            return self.failed(
                f"Core Metadata name '{name.value}' does not match objective name '{header.value}'",
                [name.line],
            )
        return ("PASS", "")
