"""
Rule GO070: Alternate pathway steps

Alternate pathways reuse local objectives; they do not declare new ones.
Every LO id they list must already be a Process Flow step.
"""

from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Alternate pathway steps must reference Process Flow LO ids"

    def run(self) -> tuple:
        doc = parse_process_document(self.document.text)
        declared = set(doc.declared_lo_ids)

        unresolved = []
        lines = []
        for pathway in doc.pathways:
            if pathway.primary:
                continue
            for step in pathway.steps:
                if step.lo_id not in declared:
                    unresolved.append(f"{pathway.name}: {step.lo_id}")
                    lines.append(step.line)

        if unresolved:
            return self.failed(f"Alternate pathway steps not in Process Flow: {', '.join(unresolved)}", lines)
        return ("PASS", "")
