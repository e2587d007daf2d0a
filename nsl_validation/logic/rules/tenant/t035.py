from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Role departments must be declared departments"

    def run(self) -> tuple:
        doc = parse_tenant_document(self.document.text)
        departments = set(doc.department_names)

        unresolved = []
        lines = []
        for role in doc.roles:
            field = role.fields.get("Department")
            if field and field.value and field.value not in departments:
                unresolved.append(f"{role.name} -> {field.value}")
                lines.append(field.line)

        if unresolved:
            return self.failed(f"Roles reference undeclared departments: {', '.join(unresolved)}", lines)
        return ("PASS", "")
