from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Business Function must be a known business function"

    def required_data(self) -> list:
        return ["business_functions"]

    def run(self) -> tuple:
        function = parse_process_document(self.document.text).section_fields("Core Metadata").get("Business Function")
        values = [(function.value, function.line)] if function and function.value else []
        return self.check_listed("business_functions", "Business function list", values)
