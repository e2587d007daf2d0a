from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Trigger Definition must state trigger type and condition"

    def run(self) -> tuple:
        section = parse_process_document(self.document.text).section("Trigger Definition")
        return self.require_fields(section, ("Trigger Type", "Trigger Condition"))
