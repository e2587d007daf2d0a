from ..base import ProcessRule
from ...extractors.process import parse_business_rules, parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Every business rule must name its enforcing LO"

    def run(self) -> tuple:
        section = parse_process_document(self.document.text).section("Business Rules")
        if section is None:
            return ("PASS", "")
        missing = [rule for rule in parse_business_rules(section.body) if rule.enforced_by is None]
        if missing:
            return self.failed(
                "Business rules without 'Enforced by LO-n': " + ", ".join(f"BR-{r.br_number}" for r in missing),
                [r.line for r in missing],
            )
        return ("PASS", "")
