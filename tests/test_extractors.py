"""
Tests for the fact extractors the rules are built on.
"""
from types import MappingProxyType

import pytest
from nsl_validation.logic.extractors import create_document_helper, is_reference_list
from nsl_validation.logic.extractors.blocks import extract_labeled_blocks, missing_labels, preceding_line
from nsl_validation.logic.extractors.document import NslDocument
from nsl_validation.logic.extractors.entity import (
    AttributeRef,
    entity_index,
    extract_calculated_field_refs,
    extract_classified_entities,
    extract_operations,
    extract_relationships,
    extract_validation_statements,
    find_header_candidates,
    has_entity_definition,
    parse_attribute,
    split_attributes,
    split_entity_blocks,
)
from nsl_validation.logic.extractors.lines import find_line_number, line_of_offset, numbered_lines, unique_lines
from nsl_validation.logic.extractors.local_objective import (
    dotted_attribute,
    pathway_targets,
    section_items,
    split_local_objectives,
)
from nsl_validation.logic.extractors.process import parse_business_rules, parse_process_document
from nsl_validation.logic.extractors.sections import (
    is_sequential,
    is_title_case,
    missing_sections,
    order_violation,
    parse_numbered_items,
    parse_preamble,
    split_sections,
)
from nsl_validation.logic.extractors.tenant import find_cycles, parse_access_rights, parse_hierarchy


class TestLines:

    def test_find_line_number_first_match(self):
        assert find_line_number("a\nbc\nbcd", "bc") == 2

    @pytest.mark.parametrize("text,search", [("", "x"), ("abc", ""), ("abc", "z")])
    def test_find_line_number_none(self, text, search):
        assert find_line_number(text, search) is None

    def test_line_of_offset(self):
        assert line_of_offset("ab\ncd", 0) == 1
        assert line_of_offset("ab\ncd", 3) == 2
        assert line_of_offset("ab\ncd", -5) == 1

    def test_numbered_lines(self):
        assert numbered_lines("") == []
        assert numbered_lines("a\n\nb") == [(1, "a"), (2, ""), (3, "b")]

    def test_unique_lines(self):
        assert unique_lines([4, 2, 4, None]) == [4, 2]


class TestEntityExtractors:

    def test_split_attributes_respects_parentheses(self):
        assert split_attributes("orderId^PK, status (New, Shipped), total") == [
            "orderId^PK",
            "status (New, Shipped)",
            "total",
        ]

    def test_parse_attribute_markers(self):
        attr = parse_attribute("customerId^FK")
        assert attr.name == "customerId"
        assert attr.is_fk and not attr.is_pk

    def test_parse_attribute_enum(self):
        attr = parse_attribute("status (New, Shipped)")
        assert attr.name == "status"
        assert attr.enum_values == ("New", "Shipped")

    def test_parse_attribute_trailing_period(self):
        attr = parse_attribute("total[derived].")
        assert attr.name == "total"
        assert attr.is_derived

    def test_split_entity_blocks(self):
        text = "Order has orderId^PK.\n* Order.total must be positive\nCustomer has customerId^PK\nCustomer has id = 5"
        blocks = split_entity_blocks(text)
        assert [(b.name, b.line) for b in blocks] == [("Order", 1), ("Customer", 3)]
        assert blocks[0].attribute_names == ["orderId"]
        assert "must be positive" in blocks[0].text
        assert "id = 5" in blocks[1].text

    def test_entity_index_keeps_first(self):
        blocks = split_entity_blocks("Order has a.\nOrder has b.")
        assert entity_index(blocks)["Order"].line == 1

    def test_header_candidates_any_case(self):
        found = find_header_candidates("invoice has id\nOrder has total = 3")
        assert found == [("invoice", "invoice has id", 1)]

    def test_has_entity_definition(self):
        assert has_entity_definition("Loan has loanId")
        assert not has_entity_definition("loans are things")
        assert not has_entity_definition(None)

    def test_relationship_foreign_key_side(self):
        text = (
            "* Customer has one-to-many relationship with Order using Customer.customerId to Order.customerId\n"
            "* Order has many-to-one relationship with Customer using Order.customerId to Customer.customerId\n"
            "* Order has one-to-one relationship with Invoice"
        )
        one_to_many, many_to_one, bare = extract_relationships(text)
        assert one_to_many.foreign_key == AttributeRef("Customer", "customerId")
        assert many_to_one.foreign_key == AttributeRef("Order", "customerId")
        assert str(many_to_one.target_ref) == "Customer.customerId"
        assert bare.source_ref is None and bare.foreign_key is None
        assert bare.line == 3

    def test_validation_statements_skip_relationships(self):
        text = "* Order.total must be positive\n* Order has one-to-many relationship with Line"
        statements = extract_validation_statements(text)
        assert len(statements) == 1
        assert statements[0].ref == AttributeRef("Order", "total")
        assert statements[0].condition == "be positive"

    def test_operations(self):
        operations = extract_operations("x\n*Operation: fetch(Loan.id) then add(a)*")
        assert operations[0].functions == ("fetch", "add")
        assert operations[0].line == 2

    def test_calculated_fields_and_classifications(self):
        assert extract_calculated_field_refs("Loan has a.\nCalculatedField for Loan.balance:") == [
            (AttributeRef("Loan", "balance"), 2)
        ]
        assert extract_classified_entities("-Internal: Order.id\n-Public: Customer.name") == {"Order", "Customer"}


class TestLabeledBlocks:

    def test_block_ends_at_blank_line(self):
        blocks = extract_labeled_blocks(
            "Entity Additional Properties:\nDisplay Name: Order\nType: Core\n\nOther", "Entity Additional Properties:"
        )
        assert len(blocks) == 1
        assert blocks[0].heading == ""
        assert [lineno for lineno, _ in blocks[0].body] == [2, 3]

    def test_block_ends_at_next_label(self):
        text = "CalculatedField for Loan.balance:\n* Formula: x\nCalculatedField for Loan.fee:\n* Formula: y"
        blocks = extract_labeled_blocks(text, "CalculatedField for")
        assert [b.heading for b in blocks] == ["Loan.balance:", "Loan.fee:"]
        assert [b.line for b in blocks] == [1, 3]

    def test_stop_at_bullet(self):
        text = "* Workflow: w\n- States: a\n* Order.total must be positive"
        assert len(extract_labeled_blocks(text, "* Workflow:", stop_at_bullet=True)[0].body) == 1
        assert len(extract_labeled_blocks(text, "* Workflow:")[0].body) == 2

    def test_missing_labels(self):
        assert missing_labels("- States: a", ["States", "Actions"], prefix="- ") == ["Actions"]

    def test_preceding_line(self):
        text = "Relationship: A to B\nx\nRelationship: C to D\nRelationship Properties:"
        assert preceding_line(text, 4, "Relationship:") == "Relationship: C to D"
        assert preceding_line(text, 1, "Relationship:") is None


class TestSections:

    @pytest.mark.parametrize("name,expected", [
        ("Process Loan Application", True),
        ("Head of Lending", True),
        ("of Lending", False),
        ("process loan", False),
        ("", False),
    ])
    def test_is_title_case(self, name, expected):
        assert is_title_case(name) is expected

    def test_is_sequential(self):
        assert is_sequential([])
        assert is_sequential([1, 2, 3])
        assert not is_sequential([2, 3])

    def test_missing_sections_near_miss(self):
        headers = [("Roles", 1), ("departments", 5)]
        assert missing_sections(headers, ["Roles", "Departments", "Access Rights"]) == [
            ("Departments", "departments", 5),
            ("Access Rights", None, None),
        ]

    def test_order_violation(self):
        assert order_violation([("A", 1), ("C", 2), ("B", 3)], ("A", "B", "C")) == (["A", "C", "B"], ["A", "B", "C"], 2)
        assert order_violation([("A", 1), ("X", 2), ("C", 3)], ("A", "B", "C")) is None

    def test_preamble_and_sections(self):
        rows = numbered_lines("Tenant: Acme\nIndustry: Banking\n\nRoles:\n1. Role: Clerk")
        assert list(parse_preamble(rows)) == ["Tenant", "Industry"]
        sections = split_sections(rows)
        assert [(s.label, s.line) for s in sections] == [("Roles", 4)]
        assert sections[0].body == ((5, "1. Role: Clerk"),)

    def test_numbered_items_of_kind(self):
        rows = numbered_lines("1. Role: Clerk\n   - Role ID: R-1\n2. Something else\n   - Role ID: R-9\n3. Role: Teller")
        items = parse_numbered_items(rows, kind="Role")
        assert [(i.number, i.name) for i in items] == [(1, "Clerk"), (3, "Teller")]
        assert items[0].fields["Role ID"].value == "R-1"
        assert items[0].fields["Role ID"].line == 2
        assert items[1].fields == {}


class TestProcessExtractors:

    TEXT = (
        "Global Objective: Tiny\n"
        "Process Flow:\n"
        "1. LO-1 [HUMAN]: Start\n"
        "   - Route: LO-2, END\n"
        "2. LO-2 [SYSTEM]: Finish\n"
        "Alternate Pathways:\n"
        "Pathway: Retry\n"
        "1. LO-2 [SYSTEM]: Finish\n"
        "Pathway: Abort\n"
        "1. LO-1 [HUMAN]: Start"
    )

    def test_pathways(self):
        doc = parse_process_document(self.TEXT)
        assert [(p.name, p.primary, len(p.steps)) for p in doc.pathways] == [
            ("Process Flow", True, 2),
            ("Retry", False, 1),
            ("Abort", False, 1),
        ]
        assert doc.declared_lo_ids == ["LO-1", "LO-2"]
        assert len(doc.steps) == 4

    def test_steps(self):
        first = parse_process_document(self.TEXT).steps[0]
        assert (first.lo_id, first.actor_type, first.name, first.line) == ("LO-1", "HUMAN", "Start", 3)
        assert first.route_targets() == ["LO-2", "END"]

    def test_business_rules_with_continuation(self):
        rows = numbered_lines("1. BR-1: Amount positive.\n   Enforced by LO-1\n2. BR-2: Other, see LO-3")
        first, second = parse_business_rules(rows)
        assert first.enforced_by == "LO-1"
        assert first.text == "Amount positive. Enforced by LO-1"
        assert second.enforced_by is None
        assert second.lo_refs == ("LO-3",)


class TestTenantExtractors:

    def test_access_rights(self):
        rights = parse_access_rights(numbered_lines("- Clerk: Loan (Read, Create); Customer (Read)\n- Auditor: everything"))
        clerk, auditor = rights
        assert [(g.entity, g.verbs) for g in clerk.grants] == [("Loan", ("Read", "Create")), ("Customer", ("Read",))]
        assert auditor.grants[0].well_formed is False
        assert auditor.line == 2

    def test_hierarchy(self):
        chains = parse_hierarchy(numbered_lines("- A > B > C\n- not a chain"))
        assert [(c.names, c.line) for c in chains] == [(("A", "B", "C"), 1)]

    @pytest.mark.parametrize("edges,expected", [
        ({"A": ["B"], "B": ["A"], "C": []}, [["A", "B", "A"]]),
        ({"A": ["B"], "B": []}, []),
        ({"A": ["A"]}, [["A", "A"]]),
    ])
    def test_find_cycles(self, edges, expected):
        assert find_cycles(edges) == expected


class TestLocalObjectiveExtractors:

    TEXT = (
        "LO-1: Start\n"
        "Function Type: Create\n"
        "\n"
        "Execution Pathway:\n"
        "- On Success: LO-2\n"
        "\n"
        "LO-2: Finish\n"
        "Execution Pathway:\n"
        "- Next: END"
    )

    def test_split(self):
        first, second = split_local_objectives(self.TEXT)
        assert (first.lo_id, first.name, first.line) == ("LO-1", "Start", 1)
        assert first.field("Function Type").value == "Create"
        assert second.line == 7
        assert second.field("Function Type") is None

    def test_pathway_targets(self):
        first, second = split_local_objectives(self.TEXT)
        assert pathway_targets(first) == [("LO-2", 5)]
        assert pathway_targets(second) == [("END", 9)]

    def test_section_items_absent_section(self):
        assert section_items(split_local_objectives(self.TEXT)[0], "Inputs") == []

    def test_dotted_attribute(self):
        assert dotted_attribute("Loan.loanAmount (required)") == ("Loan", "loanAmount")
        assert dotted_attribute("loan amount") is None
        assert dotted_attribute("Loan.LoanAmount") is None


class TestNslDocument:

    def test_read_only(self):
        doc = NslDocument({"input": "a", "output": "b"})
        assert isinstance(doc._data, MappingProxyType)
        with pytest.raises(TypeError):
            doc._data["output"] = "changed"

    def test_caller_changes_do_not_leak(self):
        data = {"input": "a", "output": "b"}
        doc = NslDocument(data)
        data["output"] = "changed"
        assert doc.output == "b"

    def test_access_tracking(self):
        doc = create_document_helper({"input": "a", "output": "b"}, track_access=True)
        doc.text
        doc.input
        doc.output
        assert doc.get_accesses() == ["output", "input"]

    def test_no_tracking_by_default(self):
        doc = create_document_helper({"input": "a"})
        doc.input
        assert doc.get_accesses() == []

    def test_non_object(self):
        doc = NslDocument(["not", "a", "dict"])
        assert doc.is_object is False
        assert doc.text == ""

    def test_non_string_output(self):
        assert NslDocument({"output": 42}).text == ""

    def test_reference_field_errors(self):
        assert NslDocument({"master_entities": ["Order"]}).reference_field_errors() == []
        problems = NslDocument({"master_entities": "Order", "org_roles": ["A", ""]}).reference_field_errors()
        assert [name for name, _ in problems] == ["master_entities", "org_roles"]
        assert "array" in problems[0][1]

    def test_is_reference_list(self):
        assert is_reference_list(["a", "b"])
        assert not is_reference_list(["a", ""])
        assert not is_reference_list("a")
