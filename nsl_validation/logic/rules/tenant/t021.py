from ..base import TenantRule
from ...extractors.sections import order_violation
from ...extractors.tenant import ACCESS_RIGHTS, DEPARTMENTS, HIERARCHY, ROLES, parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Sections must appear in the required order"

    def run(self) -> tuple:
        violation = order_violation(
            parse_tenant_document(self.document.text).headers, (ROLES, DEPARTMENTS, ACCESS_RIGHTS, HIERARCHY)
        )
        if violation is None:
            return ("PASS", "")
        found, expected, lineno = violation
        return self.failed(
            f"Sections out of order: found {', '.join(found)}; expected {', '.join(expected)}",
            [lineno],
        )
