from ..base import LocalObjectiveRule
from ...extractors.local_objective import INPUTS, OUTPUTS, dotted_attribute, section_items, split_local_objectives


class Rule(LocalObjectiveRule):
    def description(self) -> str:
        return "Inputs and outputs must be formatted Entity.attribute"

    def run(self) -> tuple:
        invalid = []
        lines = []
        for lo in split_local_objectives(self.document.text):
            for label in (INPUTS, OUTPUTS):
                for item in section_items(lo, label):
                    if dotted_attribute(item.name) is None:
                        invalid.append(f"{lo.lo_id} {label.lower()}: {item.name}")
                        lines.append(item.line)

        if invalid:
            return self.failed(f"Items not formatted as Entity.attribute: {', '.join(invalid)}", lines)
        return ("PASS", "")
