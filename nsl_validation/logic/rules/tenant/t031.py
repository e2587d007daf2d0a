from ..base import TenantRule
from ...extractors.sections import is_title_case
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Role names must be Title Case"

    def run(self) -> tuple:
        invalid = [r for r in parse_tenant_document(self.document.text).roles if not is_title_case(r.name)]
        if invalid:
            return self.failed(
                f"Role names not in Title Case: {', '.join(r.name for r in invalid)}",
                [r.line for r in invalid],
            )
        return ("PASS", "")
