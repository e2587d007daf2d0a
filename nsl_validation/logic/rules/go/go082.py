from ..base import ProcessRule
from ...extractors.process import parse_business_rules, parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Business rule LO references must resolve to Process Flow steps"

    def run(self) -> tuple:
        doc = parse_process_document(self.document.text)
        section = doc.section("Business Rules")
        if section is None:
            return ("PASS", "")
        declared = set(doc.declared_lo_ids)

        unresolved = []
        lines = []
        for rule in parse_business_rules(section.body):
            for ref in rule.lo_refs:
                if ref not in declared:
                    unresolved.append(f"BR-{rule.br_number} -> {ref}")
                    lines.append(rule.line)

        if unresolved:
            return self.failed(f"Business rules reference undeclared LOs: {', '.join(unresolved)}", lines)
        return ("PASS", "")
