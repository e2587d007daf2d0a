from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Every step must carry an actor tag such as [HUMAN] or [SYSTEM]"

    def run(self) -> tuple:
        untagged = [s for s in parse_process_document(self.document.text).steps if not s.actor_type]
        if untagged:
            return self.failed(
                f"Steps without an actor tag: {', '.join(s.lo_id for s in untagged)}",
                [s.line for s in untagged],
            )
        return ("PASS", "")
