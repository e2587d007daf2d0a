from ..base import LocalObjectiveRule
from ...extractors.local_objective import split_local_objectives

FUNCTION_TYPES = ("Create", "Read", "Update", "Delete", "Search", "Validate", "Approve")


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Function Type must be valid"

    def run(self) -> tuple:
        invalid = []
        lines = []
        for lo in split_local_objectives(self.document.text):
            function_type = lo.field("Function Type")
            if function_type and function_type.value not in FUNCTION_TYPES:
                invalid.append(f"{lo.lo_id}: {function_type.value}")
                lines.append(function_type.line)

        if invalid:
            return self.failed(
                f"Invalid function types: {', '.join(invalid)}. Valid types are: {', '.join(FUNCTION_TYPES)}.",
                lines,
            )
        return ("PASS", "")
