from ..base import LocalObjectiveRule
from ...extractors.local_objective import OUTPUTS, section_items, split_local_objectives
from ...extractors.sections import is_sequential


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Output numbering must run 1, 2, ... within each LO"

    def run(self) -> tuple:
        problems = []
        lines = []
        for lo in split_local_objectives(self.document.text):
            items = section_items(lo, OUTPUTS)
            numbers = [item.number for item in items]
            if not is_sequential(numbers):
                problems.append(f"{lo.lo_id} {numbers}")
                lines.append(items[0].line)

        if problems:
            return self.failed(f"Output numbering is not sequential from 1: {'; '.join(problems)}", lines)
        return ("PASS", "")
