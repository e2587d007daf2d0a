"""
Rule T038: Role graph is acyclic

Reports To and Inherits both point from a role to a parent role. Following
either kind of edge must never lead back to the starting role.
"""

from ..base import TenantRule
from ...extractors.sections import split_list
from ...extractors.tenant import find_cycles, parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Reports To and Inherits must not form cycles"

    def run(self) -> tuple:
        doc = parse_tenant_document(self.document.text)
        declared = {role.name: role for role in doc.roles}

        edges = {}
        for role in doc.roles:
            parents = []
            reports_to = role.fields.get("Reports To")
            if reports_to and reports_to.value:
                parents.append(reports_to.value)
            inherits = role.fields.get("Inherits")
            if inherits:
                parents.extend(split_list(inherits.value))
            edges.setdefault(role.name, [])
            edges[role.name].extend(p for p in parents if p in declared)

        cycles = find_cycles(edges)
        if cycles:
            return self.failed(
                f"Cycles in the role hierarchy: {'; '.join(' -> '.join(cycle) for cycle in cycles)}",
                [declared[cycle[0]].line for cycle in cycles],
            )
        return ("PASS", "")
