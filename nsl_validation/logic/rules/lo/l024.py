from ..base import LocalObjectiveRule
from ...extractors.local_objective import INPUTS, OUTPUTS, dotted_attribute, section_items, split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Input and output entities must exist in the master entity list"

    def required_data(self) -> list:
        return ["master_entities"]

    def run(self) -> tuple:
        values = []
        for lo in split_local_objectives(self.document.text):
            for label in (INPUTS, OUTPUTS):
                for item in section_items(lo, label):
                    ref = dotted_attribute(item.name)
                    if ref is not None:
                        values.append((ref[0], item.line))
        return self.check_listed("master_entities", "Master entity list", values)
