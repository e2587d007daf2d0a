from ..base import LocalObjectiveRule
from ...extractors.local_objective import EXECUTION_PATHWAY, split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Every local objective must have an Execution Pathway"

    def run(self) -> tuple:
        missing = [lo for lo in split_local_objectives(self.document.text) if lo.section(EXECUTION_PATHWAY) is None]
        if missing:
            return self.failed(
                f"Local objectives without an Execution Pathway: {', '.join(lo.lo_id for lo in missing)}",
                [lo.line for lo in missing],
            )
        return ("PASS", "")
