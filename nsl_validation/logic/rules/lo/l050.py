from ..base import LocalObjectiveRule
from ...extractors.local_objective import BUSINESS_RULES, split_local_objectives
from ...extractors.sections import lo_references


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "LO references in business rules must resolve"

    def run(self) -> tuple:
        objectives = split_local_objectives(self.document.text)
        declared = {lo.lo_id for lo in objectives}

        unresolved = []
        lines = []
        for lo in objectives:
            section = lo.section(BUSINESS_RULES)
            if section is None:
                continue
            for lineno, line in section.body:
                for ref in lo_references(line):
                    if ref not in declared:
                        unresolved.append(f"{lo.lo_id} -> {ref}")
                        lines.append(lineno)

        if unresolved:
            return self.failed(f"Business rules reference undeclared LOs: {', '.join(unresolved)}", lines)
        return ("PASS", "")
