from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Step actors must be known organisational roles"

    def required_data(self) -> list:
        return ["org_roles"]

    def run(self) -> tuple:
        values = []
        for step in parse_process_document(self.document.text).steps:
            actor = step.fields.get("Actor")
            if actor and actor.value:
                values.append((actor.value, actor.line))
        return self.check_listed("org_roles", "Organisational role list", values)
