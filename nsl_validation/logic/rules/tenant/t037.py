from ..base import TenantRule
from ...extractors.sections import split_list
from ...extractors.tenant import parse_tenant_document

BASE_ROLE = "Employee"


class Rule(TenantRule):
    def description(self) -> str:
        return "Inherits must name a declared role or the base role Employee"

    def run(self) -> tuple:
        doc = parse_tenant_document(self.document.text)
        known = set(doc.role_names) | {BASE_ROLE}

        unresolved = []
        lines = []
        for role in doc.roles:
            field = role.fields.get("Inherits")
            if field is None:
                continue
            for parent in split_list(field.value):
                if parent not in known:
                    unresolved.append(f"{role.name} -> {parent}")
                    lines.append(field.line)

        if unresolved:
            return self.failed(f"Roles inherit from undeclared roles: {', '.join(unresolved)}", lines)
        return ("PASS", "")
