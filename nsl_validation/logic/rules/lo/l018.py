from ..base import LocalObjectiveRule
from ...extractors.local_objective import split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "All local objectives must belong to the same Global Objective"

    def run(self) -> tuple:
        named = [(lo, lo.field("Global Objective")) for lo in split_local_objectives(self.document.text)]
        named = [(lo, field) for lo, field in named if field is not None]
        if not named:
            return ("PASS", "")

        expected = named[0][1].value
        strays = [(lo, field) for lo, field in named if field.value != expected]
        if strays:
            listed = ", ".join(f"{lo.lo_id} ({field.value})" for lo, field in strays)
            return self.failed(
                f"Local objectives name a different Global Objective than '{expected}': {listed}",
                [field.line for _, field in strays],
            )
        return ("PASS", "")
