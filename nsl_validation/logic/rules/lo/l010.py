from ..base import LocalObjectiveRule
from ...extractors.local_objective import split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "At least one local objective must be defined"

    def run(self) -> tuple:
        if split_local_objectives(self.document.text):
            return ("PASS", "")
        return self.failed("No local objectives found. Each one should start with 'LO-<n>: Name'", [1])
