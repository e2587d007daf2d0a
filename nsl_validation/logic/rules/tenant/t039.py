from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Role names must be known organisational roles"

    def required_data(self) -> list:
        return ["org_roles"]

    def run(self) -> tuple:
        roles = parse_tenant_document(self.document.text).roles
        return self.check_listed("org_roles", "Organisational role list", [(r.name, r.line) for r in roles])
