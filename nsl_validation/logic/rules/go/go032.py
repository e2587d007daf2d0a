from ..base import ProcessRule
from ...extractors.process import parse_process_document

VALID_STATUSES = ("Draft", "Active", "Deprecated", "Retired")


class Rule(ProcessRule):
    def description(self) -> str:
        return "Status must be a valid lifecycle status"

    def run(self) -> tuple:
        status = parse_process_document(self.document.text).section_fields("Core Metadata").get("Status")
        if status is None or not status.value or status.value in VALID_STATUSES:
            return ("PASS", "")
        return self.failed(
            f"Invalid status '{status.value}'. Valid statuses are: {', '.join(VALID_STATUSES)}.",
            [status.line],
        )
