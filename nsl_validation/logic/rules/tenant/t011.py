import re

from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document

TENANT_ID_RE = re.compile(r"^T\d+$")


class Rule(TenantRule):
    def description(self) -> str:
        return "Tenant ID must look like T001"

    def run(self) -> tuple:
        tenant_id = parse_tenant_document(self.document.text).preamble.get("Tenant ID")
        if tenant_id is None or TENANT_ID_RE.match(tenant_id.value):
            return ("PASS", "")
        return self.failed(f"Invalid Tenant ID '{tenant_id.value}'. Expected 'T' followed by digits", [tenant_id.line])
