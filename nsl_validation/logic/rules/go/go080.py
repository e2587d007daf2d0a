from ..base import ProcessRule
from ...extractors.process import parse_business_rules, parse_process_document
from ...extractors.sections import is_sequential


class Rule(ProcessRule):
    def description(self) -> str:
        return "Business rules must be numbered BR-1, BR-2, ... in order"

    def run(self) -> tuple:
        section = parse_process_document(self.document.text).section("Business Rules")
        if section is None:
            return ("PASS", "")
        rules = parse_business_rules(section.body)
        numbers = [rule.br_number for rule in rules]
        if is_sequential(numbers):
            return ("PASS", "")
        return self.failed(
            f"Business rule numbering is not sequential from 1: {', '.join(f'BR-{n}' for n in numbers)}",
            [rules[0].line],
        )
