from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Document must declare 'Tenant: <name>'"

    def run(self) -> tuple:
        tenant = parse_tenant_document(self.document.text).preamble.get("Tenant")
        if tenant is None or not tenant.value:
            return self.failed("No 'Tenant: <name>' line found before the first section", [1])
        return ("PASS", "")
