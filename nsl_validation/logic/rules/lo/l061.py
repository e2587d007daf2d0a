"""Placeholder: mapping stack"""

from ..base import DisabledCheck, LocalObjectiveRule


class Rule(DisabledCheck, LocalObjectiveRule):
    reason = "mapping stacks are not part of the notation yet"

    def description(self) -> str:
        return "Mapping stack must be complete (disabled)"
