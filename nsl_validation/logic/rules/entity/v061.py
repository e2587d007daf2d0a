"""
Rule V061: Approved system functions

Functions called inside "*Operation: ...*" segments must come from the
approved function list. The bundled configuration carries a default list;
a document may supply its own.
"""

from ..base import EntityRule
from ...extractors.entity import extract_operations


class Rule(EntityRule):
    def description(self) -> str:
        return "Business rules must use approved system functions"

    def required_data(self) -> list:
        return ["approved_functions"]

    def run(self) -> tuple:
        approved = self.reference.get("approved_functions")
        if approved is None:
            return self.skipped("Approved function list")

        approved = set(approved)
        unapproved = []
        lines = []
        for operation in extract_operations(self.document.text):
            for name in operation.functions:
                if name not in approved:
                    if name not in unapproved:
                        unapproved.append(name)
                    lines.append(operation.line)

        if unapproved:
            return self.failed(
                f"Unapproved functions used in business rules: {', '.join(unapproved)}",
                lines,
            )
        return ("PASS", "")
