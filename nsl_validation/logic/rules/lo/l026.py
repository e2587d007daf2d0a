"""Placeholder: outputs consumed downstream"""

from ..base import DisabledCheck, LocalObjectiveRule


class Rule(DisabledCheck, LocalObjectiveRule):
    reason = "output consumption is not traced across local objectives"

    def description(self) -> str:
        return "Outputs must be consumed by a downstream LO (disabled)"
