from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Department business functions must be known business functions"

    def required_data(self) -> list:
        return ["business_functions"]

    def run(self) -> tuple:
        values = []
        for department in parse_tenant_document(self.document.text).departments:
            function = department.fields.get("Business Function")
            if function and function.value:
                values.append((function.value, function.line))
        return self.check_listed("business_functions", "Business function list", values)
