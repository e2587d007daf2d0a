from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Organizational hierarchy must only name declared roles"

    def run(self) -> tuple:
        doc = parse_tenant_document(self.document.text)
        roles = set(doc.role_names)

        unknown = []
        lines = []
        for chain in doc.hierarchy:
            for name in chain.names:
                if name not in roles:
                    if name not in unknown:
                        unknown.append(name)
                    lines.append(chain.line)

        if unknown:
            return self.failed(f"Hierarchy names undeclared roles: {', '.join(unknown)}", lines)
        return ("PASS", "")
