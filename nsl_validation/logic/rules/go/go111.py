from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Primary Entity must exist in the master entity list"

    def required_data(self) -> list:
        return ["master_entities"]

    def run(self) -> tuple:
        entity = parse_process_document(self.document.text).section_fields("Core Metadata").get("Primary Entity")
        values = [(entity.value, entity.line)] if entity and entity.value else []
        return self.check_listed("master_entities", "Master entity list", values)
