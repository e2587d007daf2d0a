"""Validate that routes point at declared steps"""

from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Route targets must be declared LO ids or END"

    def run(self) -> tuple:
        doc = parse_process_document(self.document.text)
        declared = set(doc.declared_lo_ids)

        unresolved = []
        lines = []
        for step in doc.steps:
            for target in step.route_targets():
                if target != "END" and target not in declared:
                    unresolved.append(f"{step.lo_id} -> {target}")
                    lines.append(step.fields["Route"].line)

        if unresolved:
            return self.failed(f"Routes to undeclared steps: {', '.join(unresolved)}", lines)
        return ("PASS", "")
