from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Every [HUMAN] step must declare an Actor"

    def run(self) -> tuple:
        missing = [
            s for s in parse_process_document(self.document.text).steps
            if s.actor_type == "HUMAN" and not (s.fields.get("Actor") and s.fields["Actor"].value)
        ]
        if missing:
            return self.failed(
                f"[HUMAN] steps without an Actor: {', '.join(s.lo_id for s in missing)}",
                [s.line for s in missing],
            )
        return ("PASS", "")
