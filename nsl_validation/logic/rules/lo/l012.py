from ..base import LocalObjectiveRule
from ...extractors.local_objective import split_local_objectives
from ...extractors.sections import is_title_case


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "LO names must be Title Case"

    def run(self) -> tuple:
        invalid = [lo for lo in split_local_objectives(self.document.text) if not is_title_case(lo.name)]
        if invalid:
            return self.failed(
                "LO names not in Title Case: " + ", ".join(f"{lo.lo_id} {lo.name}".strip() for lo in invalid),
                [lo.line for lo in invalid],
            )
        return ("PASS", "")
