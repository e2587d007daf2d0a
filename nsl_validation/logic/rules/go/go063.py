from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "The first step of every pathway must be [HUMAN]"

    def run(self) -> tuple:
        problems = []
        lines = []
        for pathway in parse_process_document(self.document.text).pathways:
            if not pathway.steps:
                continue
            first = pathway.steps[0]
            if first.actor_type != "HUMAN":
                problems.append(f"{pathway.name} starts with {first.lo_id} [{first.actor_type or 'untagged'}]")
                lines.append(first.line)

        if problems:
            return self.failed(f"Pathways must start with a [HUMAN] step: {'; '.join(problems)}", lines)
        return ("PASS", "")
