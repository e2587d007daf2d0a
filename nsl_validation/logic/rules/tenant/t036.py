from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Reports To must name a declared role"

    def run(self) -> tuple:
        doc = parse_tenant_document(self.document.text)
        roles = set(doc.role_names)

        unresolved = []
        lines = []
        for role in doc.roles:
            field = role.fields.get("Reports To")
            if field and field.value and field.value not in roles:
                unresolved.append(f"{role.name} -> {field.value}")
                lines.append(field.line)

        if unresolved:
            return self.failed(f"Reports To names undeclared roles: {', '.join(unresolved)}", lines)
        return ("PASS", "")
