from ..base import LocalObjectiveRule
from ...extractors.local_objective import pathway_targets, split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "At least one local objective must route to END"

    def run(self) -> tuple:
        objectives = split_local_objectives(self.document.text)
        if not objectives:
            return ("PASS", "")
        for lo in objectives:
            if any(target == "END" for target, _ in pathway_targets(lo)):
                return ("PASS", "")
        return self.failed("No execution pathway reaches END", [objectives[-1].line])
