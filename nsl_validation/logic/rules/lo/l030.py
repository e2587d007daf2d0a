"""
Rule L030: Approved system functions

Each System Functions item is a call such as "validate_required(Loan.amount)".
The called name must be in the approved function list.
"""

import re

from ..base import LocalObjectiveRule
from ...extractors.local_objective import SYSTEM_FUNCTIONS, section_items, split_local_objectives

CALL_RE = re.compile(r"^([a-z_][a-z0-9_]*)\s*\(")


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "System functions must be approved functions"

    def required_data(self) -> list:
        return ["approved_functions"]

    def run(self) -> tuple:
        values = []
        for lo in split_local_objectives(self.document.text):
            for item in section_items(lo, SYSTEM_FUNCTIONS):
                match = CALL_RE.match(item.name)
                values.append((match.group(1) if match else item.name, item.line))
        return self.check_listed("approved_functions", "Approved function list", values)
