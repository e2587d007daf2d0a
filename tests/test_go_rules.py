"""
Tests for the global objective (process) rule family (GO-rules).

Most cases start from the bundled sample, which passes every rule, and
break one thing.
"""
import pytest


@pytest.fixture
def go_text(rule_service):
    return rule_service.sample_document("go")["output"]


def line_of(text, fragment):
    return next(i for i, line in enumerate(text.split("\n"), start=1) if fragment in line)


class TestHeader:

    def test_header_must_come_first(self, check, go_text):
        text = "Here is the process you asked for:\n" + go_text
        row = check("go", "GO010", text)
        assert row["status"] == "FAIL"
        assert row["line"] == 1
        assert "Here is the process" in row["details"]

    def test_leading_blank_lines_allowed(self, check, go_text):
        assert check("go", "GO010", "\n\n" + go_text)["status"] == "PASS"

    def test_title_case(self, check, go_text):
        text = go_text.replace("Global Objective: Process Loan Application", "Global Objective: process loan application", 1)
        row = check("go", "GO011", text)
        assert row["status"] == "FAIL"
        assert row["line"] == 1

    def test_industry_list(self, check, go_text):
        row = check("go", "GO012", go_text, industries=["Insurance"])
        assert row["status"] == "FAIL"
        assert row["details"] == "Not found in the industry list: Banking"
        assert row["line"] == line_of(go_text, "Industry: Banking")


class TestSections:

    def test_missing_section(self, check, go_text):
        text = go_text.replace("Integration Points:\n- Credit Bureau: consumed by LO-2\n", "")
        row = check("go", "GO020", text)
        assert row["status"] == "FAIL"
        assert row["details"] == "Missing required sections: Integration Points"

    def test_near_miss_label(self, check, go_text):
        text = go_text.replace("Trigger Definition:", "Trigger definition:")
        row = check("go", "GO020", text)
        assert row["status"] == "FAIL"
        assert "Trigger Definition (found 'Trigger definition')" in row["details"]
        assert row["line"] == line_of(text, "Trigger definition:")

    def test_section_order(self, check, go_text):
        ownership = "Process Ownership:\n- Originator: Loan Officer\n- Process Owner: Branch Manager\n- Business Sponsor: Head Of Lending\n\n"
        text = go_text.replace(ownership, "") + "\n" + ownership
        row = check("go", "GO021", text)
        assert row["status"] == "FAIL"
        assert row["details"].startswith("Sections out of order: found Core Metadata, Trigger Definition")
        assert row["line"] == line_of(text, "Trigger Definition:")

    def test_repeated_section(self, check, go_text):
        text = go_text + "\nBusiness Rules:\n1. BR-3: Another rule. Enforced by LO-1\n"
        row = check("go", "GO022", text)
        assert row["status"] == "FAIL"
        assert row["details"] == "Sections declared more than once: Business Rules"


class TestMetadata:

    def test_core_metadata_fields(self, check, go_text):
        text = go_text.replace("- Version: 1.0\n", "").replace("- Primary Entity: Loan\n", "")
        row = check("go", "GO030", text)
        assert row["status"] == "FAIL"
        assert row["details"] == "Core Metadata is missing: Version, Primary Entity"
        assert row["line"] == line_of(text, "Core Metadata:")

    def test_version_format(self, check, go_text):
        row = check("go", "GO031", go_text.replace("- Version: 1.0", "- Version: v1"))
        assert row["status"] == "FAIL"
        assert "'v1'" in row["details"]

    def test_status(self, check, go_text):
        row = check("go", "GO032", go_text.replace("- Status: Active", "- Status: Live"))
        assert row["status"] == "FAIL"
        assert "Valid statuses are: Draft, Active, Deprecated, Retired." in row["details"]

    def test_name_matches_header(self, check, go_text):
        row = check("go", "GO033", go_text.replace("- Name: Process Loan Application", "- Name: Loan Process"))
        assert row["status"] == "FAIL"
        assert "'Loan Process'" in row["details"]

    def test_business_function_list(self, check, go_text):
        assert check("go", "GO034", go_text, business_functions=["Lending"])["status"] == "PASS"
        assert check("go", "GO034", go_text, business_functions=["Treasury"])["status"] == "FAIL"

    def test_ownership_fields(self, check, go_text):
        row = check("go", "GO040", go_text.replace("- Business Sponsor: Head Of Lending\n", ""))
        assert row["status"] == "FAIL"
        assert row["details"] == "Process Ownership is missing: Business Sponsor"

    def test_ownership_roles(self, check, go_text):
        row = check("go", "GO041", go_text, org_roles=["Loan Officer", "Branch Manager"])
        assert row["status"] == "FAIL"
        assert row["details"] == "Not found in the organisational role list: Head Of Lending"

    def test_trigger_fields(self, check, go_text):
        row = check("go", "GO050", go_text.replace("- Trigger Condition: Customer submits an application\n", ""))
        assert row["status"] == "FAIL"
        assert "Trigger Condition" in row["details"]

    def test_trigger_type(self, check, go_text):
        row = check("go", "GO051", go_text.replace("user-initiated", "manual"))
        assert row["status"] == "FAIL"
        assert "'manual'" in row["details"]

    def test_performance_metadata(self, check, go_text):
        row = check("go", "GO100", go_text.replace("- SLA: 48 hours\n", ""))
        assert row["status"] == "FAIL"
        assert row["details"] == "Performance Metadata is missing: SLA"

    def test_primary_entity_case(self, check, go_text):
        row = check("go", "GO110", go_text.replace("- Primary Entity: Loan", "- Primary Entity: loan_record"))
        assert row["status"] == "FAIL"
        assert "loan_record" in row["details"]

    def test_primary_entity_master_list(self, check, go_text):
        assert check("go", "GO111", go_text, master_entities=["Loan", "Customer"])["status"] == "PASS"
        assert check("go", "GO111", go_text, master_entities=["Customer"])["status"] == "FAIL"

    def test_absent_sections_pass_field_checks(self, check):
        text = "Global Objective: Tiny Process\n"
        for rule_id in ("GO030", "GO031", "GO032", "GO040", "GO050", "GO051", "GO100", "GO110"):
            assert check("go", rule_id, text)["status"] == "PASS"


class TestProcessFlow:

    def test_no_steps(self, check):
        text = "Global Objective: Tiny Process\n\nProcess Flow:\nSomeone does something.\n"
        row = check("go", "GO060", text)
        assert row["status"] == "FAIL"
        assert row["line"] == 3

    def test_step_numbering(self, check, go_text):
        text = go_text.replace("3. LO-3 [HUMAN]", "4. LO-3 [HUMAN]", 1)
        row = check("go", "GO061", text)
        assert row["status"] == "FAIL"
        assert "Process Flow step numbers [1, 2, 4]" in row["details"]

    def test_lo_id_numbering(self, check, go_text):
        text = go_text.replace("2. LO-2 [SYSTEM]", "2. LO-5 [SYSTEM]").replace("Route: LO-2", "Route: LO-5")
        row = check("go", "GO061", text)
        assert row["status"] == "FAIL"
        assert "LO ids LO-1, LO-5, LO-3" in row["details"]

    def test_actor_tag_required(self, check, go_text):
        row = check("go", "GO062", go_text.replace("2. LO-2 [SYSTEM]: Run Credit Check", "2. LO-2: Run Credit Check"))
        assert row["status"] == "FAIL"
        assert row["details"] == "Steps without an actor tag: LO-2"

    def test_first_step_human(self, check, go_text):
        row = check("go", "GO063", go_text.replace("1. LO-1 [HUMAN]", "1. LO-1 [SYSTEM]"))
        assert row["status"] == "FAIL"
        assert "Process Flow starts with LO-1 [SYSTEM]" in row["details"]

    def test_system_trigger(self, check, go_text):
        row = check("go", "GO064", go_text.replace("- Trigger: LO-1 completed", "- Note: LO-1 completed"))
        assert row["status"] == "FAIL"
        assert row["details"] == "[SYSTEM] steps without a Trigger: LO-2"

    def test_human_actor(self, check, go_text):
        row = check("go", "GO065", go_text.replace("- Actor: Loan Officer", "- Note: Loan Officer"))
        assert row["status"] == "FAIL"
        assert row["details"] == "[HUMAN] steps without an Actor: LO-1"

    def test_route_targets(self, check, go_text):
        text = go_text.replace("- Route: LO-3", "- Route: LO-9")
        row = check("go", "GO066", text)
        assert row["status"] == "FAIL"
        assert row["details"] == "Routes to undeclared steps: LO-2 -> LO-9"
        assert row["line"] == line_of(text, "Route: LO-9")

    def test_terminal_step(self, check, go_text):
        row = check("go", "GO067", go_text.replace("Route: END", "Route: LO-1"))
        assert row["status"] == "FAIL"
        assert row["details"] == "No step routes to END"

    def test_step_actors_known(self, check, go_text):
        row = check("go", "GO068", go_text, org_roles=["Loan Officer"])
        assert row["status"] == "FAIL"
        assert "Branch Manager" in row["details"]

    def test_actor_types_known(self, check, go_text):
        row = check("go", "GO069", go_text, actor_types=["HUMAN"])
        assert row["status"] == "FAIL"
        assert row["details"] == "Not found in the actor type list: SYSTEM"

    def test_alternate_pathway_ids(self, check, go_text):
        text = go_text.replace("Pathway: Manual Review\n1. LO-3", "Pathway: Manual Review\n1. LO-7")
        row = check("go", "GO070", text)
        assert row["status"] == "FAIL"
        assert row["details"] == "Alternate pathway steps not in Process Flow: Manual Review: LO-7"


class TestBusinessRulesAndIntegrations:

    def test_br_numbering(self, check, go_text):
        row = check("go", "GO080", go_text.replace("2. BR-2:", "2. BR-3:"))
        assert row["status"] == "FAIL"
        assert "BR-1, BR-3" in row["details"]

    def test_enforced_by(self, check, go_text):
        row = check("go", "GO081", go_text.replace(" Enforced by LO-2", ""))
        assert row["status"] == "FAIL"
        assert row["details"] == "Business rules without 'Enforced by LO-n': BR-2"

    def test_br_references(self, check, go_text):
        row = check("go", "GO082", go_text.replace("Enforced by LO-2", "Enforced by LO-8"))
        assert row["status"] == "FAIL"
        assert row["details"] == "Business rules reference undeclared LOs: BR-2 -> LO-8"

    def test_integration_without_lo(self, check, go_text):
        row = check("go", "GO090", go_text.replace("consumed by LO-2", "consumed during review"))
        assert row["status"] == "FAIL"
        assert "Credit Bureau (no LO reference)" in row["details"]

    def test_integration_systems(self, check, go_text):
        assert check("go", "GO091", go_text, integration_systems=["Credit Bureau"])["status"] == "PASS"
        row = check("go", "GO091", go_text, integration_systems=["Core Banking"])
        assert row["status"] == "FAIL"
        assert row["line"] == line_of(go_text, "Credit Bureau")
