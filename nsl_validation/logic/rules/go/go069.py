from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Actor tags must be known actor types"

    def required_data(self) -> list:
        return ["actor_types"]

    def run(self) -> tuple:
        values = [(s.actor_type, s.line) for s in parse_process_document(self.document.text).steps if s.actor_type]
        return self.check_listed("actor_types", "Actor type list", values)
