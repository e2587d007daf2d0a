import re

from ..base import TenantRule
from ...extractors.sections import is_sequential
from ...extractors.tenant import parse_tenant_document

DEPARTMENT_ID_RE = re.compile(r"^D-(\d+)$")


class Rule(TenantRule):
    def description(self) -> str:
        return "Department IDs must be D-1, D-2, ... in order"

    def run(self) -> tuple:
        ids = []
        for department in parse_tenant_document(self.document.text).departments:
            field = department.fields.get("Department ID")
            if field and field.value:
                ids.append(field)

        malformed = [f for f in ids if not DEPARTMENT_ID_RE.match(f.value)]
        if malformed:
            return self.failed(
                f"Malformed Department IDs: {', '.join(f.value for f in malformed)}. Expected D-<n>",
                [f.line for f in malformed],
            )

        numbers = [int(DEPARTMENT_ID_RE.match(f.value).group(1)) for f in ids]
        if not is_sequential(numbers):
            return self.failed(
                f"Department IDs are not sequential from D-1: {', '.join(f.value for f in ids)}",
                [ids[0].line],
            )
        return ("PASS", "")
