from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Every [SYSTEM] step must declare a Trigger"

    def run(self) -> tuple:
        missing = [
            s for s in parse_process_document(self.document.text).steps
            if s.actor_type == "SYSTEM" and not (s.fields.get("Trigger") and s.fields["Trigger"].value)
        ]
        if missing:
            return self.failed(
                f"[SYSTEM] steps without a Trigger: {', '.join(s.lo_id for s in missing)}",
                [s.line for s in missing],
            )
        return ("PASS", "")
