"""
Rule T034: Role IDs

Role IDs run R-1, R-2, ... in declaration order. Roles without an ID are
reported by T033, so they are skipped here.
"""

import re

from ..base import TenantRule
from ...extractors.sections import is_sequential
from ...extractors.tenant import parse_tenant_document

ROLE_ID_RE = re.compile(r"^R-(\d+)$")


class Rule(TenantRule):
    def description(self) -> str:
        return "Role IDs must be R-1, R-2, ... in order"

    def run(self) -> tuple:
        ids = []
        for role in parse_tenant_document(self.document.text).roles:
            field = role.fields.get("Role ID")
            if field and field.value:
                ids.append(field)

        malformed = [f for f in ids if not ROLE_ID_RE.match(f.value)]
        if malformed:
            return self.failed(
                f"Malformed Role IDs: {', '.join(f.value for f in malformed)}. Expected R-<n>",
                [f.line for f in malformed],
            )

        numbers = [int(ROLE_ID_RE.match(f.value).group(1)) for f in ids]
        if not is_sequential(numbers):
            return self.failed(
                f"Role IDs are not sequential from R-1: {', '.join(f.value for f in ids)}",
                [ids[0].line],
            )
        return ("PASS", "")
