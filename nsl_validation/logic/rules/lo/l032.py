"""Placeholder: nested function mappings"""

from ..base import DisabledCheck, LocalObjectiveRule


class Rule(DisabledCheck, LocalObjectiveRule):
    reason = "nested function arguments are not mapped to inputs"

    def description(self) -> str:
        return "Nested system function arguments must map to inputs (disabled)"
