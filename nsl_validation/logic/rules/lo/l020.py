from ..base import LocalObjectiveRule
from ...extractors.local_objective import INPUTS, section_items, split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Every local objective must have at least one input"

    def run(self) -> tuple:
        missing = [lo for lo in split_local_objectives(self.document.text) if not section_items(lo, INPUTS)]
        if missing:
            return self.failed(
                f"Local objectives without inputs: {', '.join(lo.lo_id for lo in missing)}",
                [lo.line for lo in missing],
            )
        return ("PASS", "")
