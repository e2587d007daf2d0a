from ..base import ProcessRule
from ...extractors.process import parse_integration_points, parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Integration systems must be known systems"

    def required_data(self) -> list:
        return ["integration_systems"]

    def run(self) -> tuple:
        section = parse_process_document(self.document.text).section("Integration Points")
        points = parse_integration_points(section.body) if section else []
        return self.check_listed(
            "integration_systems", "Integration system list", [(p.system, p.line) for p in points]
        )
