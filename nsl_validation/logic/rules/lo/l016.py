from ..base import LocalObjectiveRule
from ...extractors.local_objective import split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "HUMAN local objectives must declare a Role"

    def run(self) -> tuple:
        missing = []
        for lo in split_local_objectives(self.document.text):
            actor_type = lo.field("Actor Type")
            if actor_type and actor_type.value == "HUMAN" and lo.field("Role") is None:
                missing.append(lo)

        if missing:
            return self.failed(
                f"HUMAN local objectives without a Role: {', '.join(lo.lo_id for lo in missing)}",
                [lo.line for lo in missing],
            )
        return ("PASS", "")
