import re

from ..base import TenantRule
from ...extractors.sections import split_list
from ...extractors.tenant import parse_tenant_document

PERMISSION_RE = re.compile(r"^[A-Z][A-Za-z0-9_]*\.[A-Z][A-Za-z]*$")


class Rule(TenantRule):
    def description(self) -> str:
        return "Role permissions must be formatted Entity.Action"

    def run(self) -> tuple:
        invalid = []
        lines = []
        for role in parse_tenant_document(self.document.text).roles:
            field = role.fields.get("Permissions")
            if field is None:
                continue
            for permission in split_list(field.value):
                if not PERMISSION_RE.match(permission):
                    invalid.append(f"{role.name}: {permission}")
                    lines.append(field.line)

        if invalid:
            return self.failed(f"Permissions not formatted as Entity.Action: {', '.join(invalid)}", lines)
        return ("PASS", "")
