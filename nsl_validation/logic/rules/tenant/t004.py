from ..base import TenantRule, check_reference_fields


class Rule(TenantRule):
    def description(self) -> str:
        return "Supplied reference lists must be arrays of strings"

    def run(self) -> tuple:
        return check_reference_fields(self.document)
