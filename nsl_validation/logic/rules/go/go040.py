from ..base import ProcessRule
from ...extractors.process import parse_process_document

OWNERSHIP_FIELDS = ("Originator", "Process Owner", "Business Sponsor")


class Rule(ProcessRule):
    def description(self) -> str:
        return "Process Ownership must name originator, owner and sponsor"

    def run(self) -> tuple:
        section = parse_process_document(self.document.text).section("Process Ownership")
        return self.require_fields(section, OWNERSHIP_FIELDS)
