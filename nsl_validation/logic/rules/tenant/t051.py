"""
Rule T051: Access verbs

Each grant reads "Entity (Verb, Verb)". Verbs come from a fixed set; a grant
that does not have that shape at all is reported as malformed.
"""

from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document

VALID_VERBS = ("Create", "Read", "Update", "Delete", "Approve")


class Rule(TenantRule):
    def description(self) -> str:
        return "Access right verbs must be valid"

    def run(self) -> tuple:
        problems = []
        lines = []
        for right in parse_tenant_document(self.document.text).access_rights:
            for grant in right.grants:
                if not grant.well_formed:
                    problems.append(f"{right.role}: malformed grant '{grant.entity}'")
                    lines.append(right.line)
                    continue
                for verb in grant.verbs:
                    if verb not in VALID_VERBS:
                        problems.append(f"{right.role}: {grant.entity} ({verb})")
                        lines.append(right.line)

        if problems:
            return self.failed(
                f"Invalid access rights: {'; '.join(problems)}. Valid verbs are: {', '.join(VALID_VERBS)}.",
                lines,
            )
        return ("PASS", "")
