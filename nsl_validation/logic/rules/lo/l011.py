from ..base import LocalObjectiveRule
from ...extractors.local_objective import split_local_objectives
from ...extractors.sections import is_sequential


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "LO ids must be numbered sequentially from LO-1"

    def run(self) -> tuple:
        objectives = split_local_objectives(self.document.text)
        if is_sequential([lo.number for lo in objectives]):
            return ("PASS", "")
        return self.failed(
            f"LO ids are not sequential from LO-1: {', '.join(lo.lo_id for lo in objectives)}",
            [objectives[0].line],
        )
