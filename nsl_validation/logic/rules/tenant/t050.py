from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Access rights must be granted to declared roles"

    def run(self) -> tuple:
        doc = parse_tenant_document(self.document.text)
        roles = set(doc.role_names)
        unknown = [right for right in doc.access_rights if right.role not in roles]
        if unknown:
            return self.failed(
                f"Access rights for undeclared roles: {', '.join(r.role for r in unknown)}",
                [r.line for r in unknown],
            )
        return ("PASS", "")
