"""Placeholder: pathway covers every outcome"""

from ..base import DisabledCheck, LocalObjectiveRule


class Rule(DisabledCheck, LocalObjectiveRule):
    reason = "outcome coverage produced false positives on conditional pathways"

    def description(self) -> str:
        return "Execution Pathway must cover every outcome (disabled)"
