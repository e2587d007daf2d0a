from ..base import ProcessRule
from ...extractors.process import parse_process_document

TRIGGER_TYPES = ("user-initiated", "system-initiated", "scheduled", "event-driven")


class Rule(ProcessRule):
    def description(self) -> str:
        return "Trigger type must be valid"

    def run(self) -> tuple:
        trigger = parse_process_document(self.document.text).section_fields("Trigger Definition").get("Trigger Type")
        if trigger is None or not trigger.value or trigger.value in TRIGGER_TYPES:
            return ("PASS", "")
        return self.failed(
            f"Invalid trigger type '{trigger.value}'. Valid types are: {', '.join(TRIGGER_TYPES)}.",
            [trigger.line],
        )
