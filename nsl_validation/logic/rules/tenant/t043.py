from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Department heads must be declared roles"

    def run(self) -> tuple:
        doc = parse_tenant_document(self.document.text)
        roles = set(doc.role_names)

        unresolved = []
        lines = []
        for department in doc.departments:
            head = department.fields.get("Head")
            if head and head.value and head.value not in roles:
                unresolved.append(f"{department.name} -> {head.value}")
                lines.append(head.line)

        if unresolved:
            return self.failed(f"Department heads are not declared roles: {', '.join(unresolved)}", lines)
        return ("PASS", "")
