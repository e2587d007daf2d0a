from ..base import TenantRule, check_non_empty_string


class Rule(TenantRule):
    def description(self) -> str:
        return "Input must be non-empty string"

    def run(self) -> tuple:
        return check_non_empty_string(self.document, "input")
