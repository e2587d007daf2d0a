from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document

DEPARTMENT_FIELDS = ("Department ID", "Head", "Business Function")


class Rule(TenantRule):
    def description(self) -> str:
        return "Each department must have Department ID, Head and Business Function"

    def run(self) -> tuple:
        incomplete = []
        lines = []
        for department in parse_tenant_document(self.document.text).departments:
            missing = [k for k in DEPARTMENT_FIELDS if k not in department.fields or not department.fields[k].value]
            if missing:
                incomplete.append(f"{department.name} missing: {', '.join(missing)}")
                lines.append(department.line)

        if incomplete:
            return self.failed(f"Incomplete department definitions: {'; '.join(incomplete)}", lines)
        return ("PASS", "")
