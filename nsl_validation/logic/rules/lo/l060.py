"""Placeholder: UI controls"""

from ..base import DisabledCheck, LocalObjectiveRule


class Rule(DisabledCheck, LocalObjectiveRule):
    reason = "UI control definitions are not part of the notation yet"

    def description(self) -> str:
        return "Every input must have a UI control (disabled)"
