from ..base import TenantRule
from ...extractors.tenant import parse_tenant_document


class Rule(TenantRule):
    def description(self) -> str:
        return "Industry must be a known industry"

    def required_data(self) -> list:
        return ["industries"]

    def run(self) -> tuple:
        industry = parse_tenant_document(self.document.text).preamble.get("Industry")
        values = [(industry.value, industry.line)] if industry else []
        return self.check_listed("industries", "Industry list", values)
