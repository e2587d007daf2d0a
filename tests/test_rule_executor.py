"""
Tests for RuleExecutor

Uses small in-test rule classes so each outcome shape can be exercised.
"""
import pytest
from nsl_validation.logic.rules.base import DisabledCheck, EntityRule
from nsl_validation.rule_executor import RuleExecutor
from nsl_validation.rule_loader import RuleEntry


class PassingRule(EntityRule):
    def description(self):
        return "Always passes"

    def run(self):
        return ("PASS", "")


class FailingRule(EntityRule):
    def description(self):
        return "Always fails"

    def run(self):
        return self.failed("Something is wrong", [4, 2, 4, None])


class ExplodingRule(EntityRule):
    def description(self):
        return "Raises"

    def run(self):
        raise KeyError("missing")


class SilentExplodingRule(EntityRule):
    def description(self):
        return "Raises without a message"

    def run(self):
        raise RuntimeError()


class BadShapeRule(EntityRule):
    def description(self):
        return "Returns a bare string"

    def run(self):
        return "PASS"


class UnknownStatusRule(EntityRule):
    def description(self):
        return "Returns WARN"

    def run(self):
        return ("WARN", "hmm")


class ReferenceRule(EntityRule):
    def description(self):
        return "Echoes its reference list"

    def required_data(self):
        return ["master_entities"]

    def run(self):
        values = self.reference.get("master_entities")
        if values is None:
            return self.skipped("Master entity list")
        return ("PASS", ", ".join(values))


class MutatingRule(EntityRule):
    def description(self):
        return "Tries to write to the document"

    def run(self):
        self.document._data["output"] = "changed"
        return ("PASS", "")


class ParkedRule(DisabledCheck, EntityRule):
    reason = "under review"

    def description(self):
        return "Parked check (disabled)"


def entries(*classes):
    return [RuleEntry(f"X{i:03d}", "Testing", cls) for i, cls in enumerate(classes, start=1)]


@pytest.fixture
def document():
    return {"input": "prompt", "output": "Customer has customerId^PK"}


class TestOutcomes:
    """Rule outcomes become report rows."""

    def test_pass_row(self, document):
        [row] = RuleExecutor(entries(PassingRule), document, {}).execute()
        assert row == {
            "rule_id": "X001",
            "description": "Always passes",
            "section": "Testing",
            "status": "PASS",
            "passed": True,
            "details": "Validation passed",
            "line": None,
            "lines": [],
        }

    def test_fail_row_lines_deduplicated(self, document):
        [row] = RuleExecutor(entries(FailingRule), document, {}).execute()
        assert row["status"] == "FAIL"
        assert row["passed"] is False
        assert row["details"] == "Something is wrong"
        assert row["lines"] == [4, 2]
        assert row["line"] == 4

    def test_fail_without_message(self, document):
        class QuietFail(EntityRule):
            def description(self):
                return "Quiet"

            def run(self):
                return ("FAIL", "")

        [row] = RuleExecutor(entries(QuietFail), document, {}).execute()
        assert row["details"] == "Validation failed"

    def test_disabled_check(self, document):
        [row] = RuleExecutor(entries(ParkedRule), document, {}).execute()
        assert row["status"] == "PASS"
        assert row["details"] == "Check disabled: under review"


class TestIsolation:
    """A rule that misbehaves never stops the others."""

    def test_exception_becomes_error_row(self, document):
        rows = RuleExecutor(entries(PassingRule, ExplodingRule, FailingRule), document, {}).execute()

        assert [r["status"] for r in rows] == ["PASS", "ERROR", "FAIL"]
        error = rows[1]
        assert error["passed"] is False
        assert error["details"].startswith("Validator error: ")
        assert "missing" in error["details"]
        assert error["description"] == "Raises"

    def test_exception_without_message(self, document):
        [row] = RuleExecutor(entries(SilentExplodingRule), document, {}).execute()
        assert row["details"] == "Validator error: RuntimeError"

    def test_bad_return_shape(self, document):
        [row] = RuleExecutor(entries(BadShapeRule), document, {}).execute()
        assert row["status"] == "ERROR"

    def test_unknown_status(self, document):
        [row] = RuleExecutor(entries(UnknownStatusRule), document, {}).execute()
        assert row["status"] == "ERROR"
        assert "WARN" in row["details"]

    def test_document_is_read_only(self, document):
        [row] = RuleExecutor(entries(MutatingRule), document, {}).execute()
        assert row["status"] == "ERROR"
        assert document["output"] == "Customer has customerId^PK"


class TestReferenceData:
    """Reference lists are injected per rule."""

    def test_list_supplied(self, document):
        [row] = RuleExecutor(entries(ReferenceRule), document, {"master_entities": ["Customer", "Loan"]}).execute()
        assert row["details"] == "Customer, Loan"

    def test_list_absent(self, document):
        [row] = RuleExecutor(entries(ReferenceRule), document, {"master_entities": None}).execute()
        assert row["status"] == "PASS"
        assert row["details"] == "Master entity list not supplied; check skipped"


class TestOrdering:
    def test_rows_follow_entry_order(self, document):
        rows = RuleExecutor(entries(FailingRule, PassingRule, ParkedRule), document, {}).execute()
        assert [r["rule_id"] for r in rows] == ["X001", "X002", "X003"]

    def test_repeat_runs_identical(self, document):
        executor_entries = entries(PassingRule, FailingRule, ExplodingRule)
        first = RuleExecutor(executor_entries, document, {}).execute()
        second = RuleExecutor(executor_entries, document, {}).execute()
        assert first == second
