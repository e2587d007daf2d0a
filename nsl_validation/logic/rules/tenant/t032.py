from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Role names must be unique"

    def run(self) -> tuple:
        seen = set()
        duplicates = []
        lines = []
        for role in parse_tenant_document(self.document.text).roles:
            if role.name in seen:
                if role.name not in duplicates:
                    duplicates.append(role.name)
                lines.append(role.line)
            seen.add(role.name)

        if duplicates:
            return self.failed(f"Roles declared more than once: {', '.join(duplicates)}", lines)
        return ("PASS", "")
