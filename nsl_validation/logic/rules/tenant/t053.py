from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Granted entities must exist in the master entity list"

    def required_data(self) -> list:
        return ["master_entities"]

    def run(self) -> tuple:
        values = []
        for right in parse_tenant_document(self.document.text).access_rights:
            for grant in right.grants:
                if grant.well_formed:
                    values.append((grant.entity, right.line))
        return self.check_listed("master_entities", "Master entity list", values)
