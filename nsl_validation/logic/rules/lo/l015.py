from ..base import LocalObjectiveRule
from ...extractors.local_objective import split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Actor Type must be a known actor type"

    def required_data(self) -> list:
        return ["actor_types"]

    def run(self) -> tuple:
        values = []
        for lo in split_local_objectives(self.document.text):
            actor_type = lo.field("Actor Type")
            if actor_type:
                values.append((actor_type.value, actor_type.line))
        return self.check_listed("actor_types", "Actor type list", values)
