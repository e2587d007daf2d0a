"""
Rule GO061: Step numbering

Step numbers restart at 1 in every pathway and run without gaps. In the
Process Flow the LO ids are also sequential, so LO-n is the n-th step.
"""

from ..base import ProcessRule
from ...extractors.process import parse_process_document
from ...extractors.sections import is_sequential


class Rule(ProcessRule):
    def description(self) -> str:
        return "Steps and LO ids must be numbered sequentially from 1"

    def run(self) -> tuple:
        problems = []
        lines = []
        for pathway in parse_process_document(self.document.text).pathways:
            if not pathway.steps:
                continue
            numbers = [step.number for step in pathway.steps]
            if not is_sequential(numbers):
                problems.append(f"{pathway.name} step numbers {numbers}")
                lines.append(pathway.steps[0].line)
            if pathway.primary:
                lo_numbers = [step.lo_number for step in pathway.steps]
                if not is_sequential(lo_numbers):
                    problems.append(f"{pathway.name} LO ids {', '.join(s.lo_id for s in pathway.steps)}")
                    lines.append(pathway.steps[0].line)

        if problems:
            return self.failed(f"Numbering is not sequential from 1: {'; '.join(problems)}", lines)
        return ("PASS", "")
