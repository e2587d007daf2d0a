from ..base import ProcessRule, check_non_empty_string


class Rule(ProcessRule):
    def description(self) -> str:
        return "Output must be non-empty string"

    def run(self) -> tuple:
        return check_non_empty_string(self.document, "output")
