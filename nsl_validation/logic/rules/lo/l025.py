"""Placeholder: inputs defined in the entity model"""

from ..base import DisabledCheck, LocalObjectiveRule


class Rule(DisabledCheck, LocalObjectiveRule):
    reason = "inputs are not cross-checked against an entity model"

    def description(self) -> str:
        return "Inputs must be defined in the entity model (disabled)"
