from ..base import LocalObjectiveRule
from ...extractors.local_objective import split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Role must be a known organisational role"

    def required_data(self) -> list:
        return ["org_roles"]

    def run(self) -> tuple:
        values = []
        for lo in split_local_objectives(self.document.text):
            role = lo.field("Role")
            if role:
                values.append((role.value, role.line))
        return self.check_listed("org_roles", "Organisational role list", values)
