from ..base import ProcessRule
from ...extractors.process import parse_process_document
from ...extractors.sections import is_title_case


class Rule(ProcessRule):
    def description(self) -> str:
        return "Objective name must be Title Case"

    def run(self) -> tuple:
        header = parse_process_document(self.document.text).preamble.get("Global Objective")
        if header is None or is_title_case(header.value):
            return ("PASS", "")
        return self.failed(f"Objective name is not in Title Case: {header.value}", [header.line])
