from ..base import LocalObjectiveRule
from ...extractors.local_objective import pathway_targets, split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Execution Pathway targets must be declared LOs or END"

    def run(self) -> tuple:
        objectives = split_local_objectives(self.document.text)
        declared = {lo.lo_id for lo in objectives}

        unresolved = []
        lines = []
        for lo in objectives:
            for target, lineno in pathway_targets(lo):
                if target != "END" and target not in declared:
                    unresolved.append(f"{lo.lo_id} -> {target}")
                    lines.append(lineno)

        if unresolved:
            return self.failed(f"Execution pathways name undeclared LOs: {', '.join(unresolved)}", lines)
        return ("PASS", "")
