from ..base import ProcessRule
from ...extractors.process import PROCESS_FLOW, parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Process Flow must contain at least one step"

    def run(self) -> tuple:
        doc = parse_process_document(self.document.text)
        primary = [p for p in doc.pathways if p.primary]
        if primary and primary[0].steps:
            return ("PASS", "")
        section = doc.section(PROCESS_FLOW)
        return self.failed(
            "Process Flow has no steps. Steps look like '1. LO-1 [HUMAN]: Step Name'",
            [section.line] if section else [],
        )
