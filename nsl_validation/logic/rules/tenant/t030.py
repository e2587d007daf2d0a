from ..base import TenantRule
from ...extractors.tenant import ROLES, parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "At least one role must be defined"

    def run(self) -> tuple:
        doc = parse_tenant_document(self.document.text)
        if doc.roles:
            return ("PASS", "")
        section = doc.section(ROLES)
        return self.failed(
            "No roles defined. Roles look like '1. Role: Loan Officer'",
            [section.line] if section else [],
        )
