"""Shared fixtures for the rule family tests."""
import pytest
from nsl_validation import ValidationService


@pytest.fixture(scope="session")
def rule_service():
    """One service for every rule test; building the registry imports ~130 modules."""
    svc = ValidationService()
    yield svc
    svc.close()


@pytest.fixture
def check(rule_service):
    """
    Run a family against an output text and return one rule's row.

    Usage:
        row = check("entity", "V010", "invoice has id^PK")
        row = check("go", "GO041", text, org_roles=["Loan Officer"])
    """
    def _check(family, rule_id, output, input_text="prompt", **reference_lists):
        document = {"input": input_text, "output": output, **reference_lists}
        report = rule_service.validate(family, document)
        return next(r for r in report["results"] if r["rule_id"] == rule_id)

    return _check
