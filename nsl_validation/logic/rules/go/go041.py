from ..base import ProcessRule
from ...extractors.process import parse_process_document

OWNERSHIP_FIELDS = ("Originator", "Process Owner", "Business Sponsor")


class Rule(ProcessRule):
    def description(self) -> str:
        return "Process ownership roles must be known organisational roles"

    def required_data(self) -> list:
        return ["org_roles"]

    def run(self) -> tuple:
        fields = parse_process_document(self.document.text).section_fields("Process Ownership")
        values = [(fields[key].value, fields[key].line) for key in OWNERSHIP_FIELDS
                  if key in fields and fields[key].value]
        return self.check_listed("org_roles", "Organisational role list", values)
