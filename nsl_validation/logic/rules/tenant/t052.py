from ..base import TenantRule
from ...extractors.tenant import ACCESS_RIGHTS, parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Every role must have an access-right entry"

    def run(self) -> tuple:
        doc = parse_tenant_document(self.document.text)
        if doc.section(ACCESS_RIGHTS) is None:
            return ("PASS", "")
        granted = {right.role for right in doc.access_rights}
        missing = [role for role in doc.roles if role.name not in granted]
        if missing:
            return self.failed(
                f"Roles without access rights: {', '.join(r.name for r in missing)}",
                [r.line for r in missing],
            )
        return ("PASS", "")
