from ..base import ProcessRule
from ...extractors.process import PROCESS_FLOW, parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "The process must have a terminal step routing to END"

    def run(self) -> tuple:
        doc = parse_process_document(self.document.text)
        steps = doc.steps
        if not steps:
            return ("PASS", "")
        if any("END" in step.route_targets() for step in steps):
            return ("PASS", "")
        section = doc.section(PROCESS_FLOW)
        return self.failed("No step routes to END", [section.line] if section else [])
