from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document

ROLE_FIELDS = ("Role ID", "Department", "Permissions")


class Rule(TenantRule):
    def description(self) -> str:
        return "Each role must have Role ID, Department and Permissions"

    def run(self) -> tuple:
        incomplete = []
        lines = []
        for role in parse_tenant_document(self.document.text).roles:
            missing = [key for key in ROLE_FIELDS if key not in role.fields or not role.fields[key].value]
            if missing:
                incomplete.append(f"{role.name} missing: {', '.join(missing)}")
                lines.append(role.line)

        if incomplete:
            return self.failed(f"Incomplete role definitions: {'; '.join(incomplete)}", lines)
        return ("PASS", "")
