from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Performance Metadata must state cycle time, volume and SLA"

    def run(self) -> tuple:
        section = parse_process_document(self.document.text).section("Performance Metadata")
        return self.require_fields(section, ("Cycle Time", "Volume", "SLA"))
