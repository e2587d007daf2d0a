from ..base import TenantRule
from ...extractors.sections import missing_sections
from ...extractors.tenant import ACCESS_RIGHTS, DEPARTMENTS, ROLES, parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Roles, Departments and Access Rights sections must be present"

    def run(self) -> tuple:
        missing = missing_sections(
            parse_tenant_document(self.document.text).headers, (ROLES, DEPARTMENTS, ACCESS_RIGHTS)
        )
        if missing:
            listed = [f"{label} (found '{near}')" if near else label for label, near, _ in missing]
            return self.failed(
                f"Missing required sections: {', '.join(listed)}",
                [lineno for _, _, lineno in missing],
            )
        return ("PASS", "")
