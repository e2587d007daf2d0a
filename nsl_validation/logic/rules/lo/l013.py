from ..base import LocalObjectiveRule
from ...extractors.local_objective import split_local_objectives

REQUIRED_FIELDS = ("Global Objective", "Function Type", "Actor Type", "Description")


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Each LO must state Global Objective, Function Type, Actor Type and Description"

    def run(self) -> tuple:
        incomplete = []
        lines = []
        for lo in split_local_objectives(self.document.text):
            missing = [key for key in REQUIRED_FIELDS if lo.field(key) is None]
            if missing:
                incomplete.append(f"{lo.lo_id} missing: {', '.join(missing)}")
                lines.append(lo.line)

        if incomplete:
            return self.failed(f"Incomplete local objectives: {'; '.join(incomplete)}", lines)
        return ("PASS", "")
