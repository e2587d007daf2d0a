from ..base import TenantRule
from ...extractors.tenant import DEPARTMENTS, parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "At least one department must be defined"

    def run(self) -> tuple:
        doc = parse_tenant_document(self.document.text)
        if doc.departments:
            return ("PASS", "")
        section = doc.section(DEPARTMENTS)
        return self.failed(
            "No departments defined. Departments look like '1. Department: Lending'",
            [section.line] if section else [],
        )
