from ..base import LocalObjectiveRule
from ...extractors.local_objective import SYSTEM_FUNCTIONS, section_items, split_local_objectives
from ...extractors.sections import is_sequential


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "System function numbering must run 1, 2, ... within each LO"

    def run(self) -> tuple:
        problems = []
        lines = []
        for lo in split_local_objectives(self.document.text):
            items = section_items(lo, SYSTEM_FUNCTIONS)
            numbers = [item.number for item in items]
            if not is_sequential(numbers):
                problems.append(f"{lo.lo_id} {numbers}")
                lines.append(items[0].line)

        if problems:
            return self.failed(f"System function numbering is not sequential from 1: {'; '.join(problems)}", lines)
        return ("PASS", "")
