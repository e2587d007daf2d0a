from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Industry must be a known industry"

    def required_data(self) -> list:
        return ["industries"]

    def run(self) -> tuple:
        industry = parse_process_document(self.document.text).preamble.get("Industry")
        values = [(industry.value, industry.line)] if industry else []
        return self.check_listed("industries", "Industry list", values)
