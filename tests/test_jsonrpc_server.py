"""
Tests for JSON-RPC Server

Tests the JSON-RPC wrapper around ValidationService API.
"""
import io
import json
import pytest
from nsl_validation import ValidationService
from nsl_validation.jsonrpc_server import ValidationJsonRpcServer


@pytest.fixture(scope="module")
def shared_service():
    svc = ValidationService()
    yield svc
    svc.close()


@pytest.fixture
def server(shared_service):
    """Create a ValidationJsonRpcServer instance for testing."""
    return ValidationJsonRpcServer(debug=False, service=shared_service)


@pytest.fixture
def sample_document():
    """Entity document with a lowercase entity name."""
    return {
        "id": "TEST-001",
        "input": "Model invoices",
        "output": "invoice has invoiceId^PK, amount",
    }


def call(server, method, params=None, request_id=1):
    request = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        request["params"] = params
    return server.handle_request(json.dumps(request))


class TestRequestParsing:
    """Test JSON-RPC request parsing."""

    def test_valid_request(self, server):
        response = call(server, "discover_families", {})

        assert response["jsonrpc"] == "2.0"
        assert response["id"] == 1
        assert "result" in response

    def test_params_optional(self, server):
        response = call(server, "discover_families")
        assert "result" in response

    def test_invalid_json(self, server):
        response = server.handle_request("not valid json {")

        assert response["error"]["code"] == -32700
        assert response["id"] is None

    def test_request_not_object(self, server):
        response = server.handle_request(json.dumps([1, 2, 3]))
        assert response["error"]["code"] == -32600

    def test_missing_jsonrpc_version(self, server):
        response = server.handle_request(json.dumps({"id": 1, "method": "discover_families"}))

        assert response["error"]["code"] == -32600
        assert "version" in response["error"]["message"].lower()

    def test_wrong_jsonrpc_version(self, server):
        response = server.handle_request(
            json.dumps({"jsonrpc": "1.0", "id": 1, "method": "discover_families"})
        )
        assert response["error"]["code"] == -32600

    def test_missing_method(self, server):
        response = server.handle_request(json.dumps({"jsonrpc": "2.0", "id": 7, "params": {}}))

        assert response["error"]["code"] == -32600
        assert response["id"] == 7

    def test_params_not_dict(self, server):
        response = call(server, "discover_families", ["entity"])

        assert response["error"]["code"] == -32602
        assert "list" in response["error"]["message"]


class TestMethodDispatch:
    """Test method dispatch."""

    def test_unknown_method(self, server):
        response = call(server, "reload_logic", {})

        assert response["error"]["code"] == -32601
        assert "not found" in response["error"]["message"].lower()

    def test_discover_families_method(self, server):
        response = call(server, "discover_families", {})

        assert set(response["result"]) == {"entity", "go", "tenant", "lo"}

    def test_sample_document_method(self, server):
        response = call(server, "sample_document", {"family": "tenant"})

        assert response["result"]["output"].startswith("Tenant:")

    def test_response_is_json_serialisable(self, server, sample_document):
        response = call(server, "validate", {"family": "entity", "document": sample_document})
        assert json.loads(json.dumps(response)) == response


class TestValidateMethod:
    """Test 'validate' method."""

    def test_validate_success(self, server, sample_document):
        response = call(server, "validate", {"family": "entity", "document": sample_document})

        report = response["result"]
        assert report["family"] == "entity"
        v010 = next(r for r in report["results"] if r["rule_id"] == "V010")
        assert v010["status"] == "FAIL"
        assert v010["line"] == 1

    def test_validate_missing_family(self, server, sample_document):
        response = call(server, "validate", {"document": sample_document})

        assert response["error"]["code"] == -32001
        assert "family" in response["error"]["message"]

    def test_validate_missing_document(self, server):
        response = call(server, "validate", {"family": "entity"})

        assert response["error"]["code"] == -32001
        assert "document" in response["error"]["message"]

    def test_validate_unknown_family(self, server, sample_document):
        response = call(server, "validate", {"family": "loan", "document": sample_document})

        assert response["error"]["code"] == -32001
        assert "loan" in response["error"]["message"]

    def test_validate_document_not_object(self, server):
        response = call(server, "validate", {"family": "entity", "document": "text"})
        assert response["error"]["code"] == -32001


class TestDiscoverRulesMethod:
    """Test 'discover_rules' method."""

    def test_discover_rules_success(self, server):
        response = call(server, "discover_rules", {"family": "go"})

        assert "GO001" in response["result"]
        assert response["result"]["GO001"]["section"] == "Required Format"

    def test_discover_rules_missing_params(self, server):
        response = call(server, "discover_rules", {})
        assert response["error"]["code"] == -32001


class TestBatchMethods:
    """Test 'batch_validate' and 'batch_file_validate' methods."""

    def test_batch_validate_success(self, server, sample_document):
        second = dict(sample_document, id="TEST-002")
        response = call(server, "batch_validate", {"documents": [sample_document, second], "family": "entity"})

        results = response["result"]
        assert [r["document_id"] for r in results] == ["TEST-001", "TEST-002"]

    def test_batch_validate_id_field(self, server, sample_document):
        response = call(
            server,
            "batch_validate",
            {"documents": [sample_document], "family": "entity", "id_field": "input"},
        )
        assert response["result"][0]["document_id"] == "Model invoices"

    def test_batch_validate_documents_not_list(self, server, sample_document):
        response = call(server, "batch_validate", {"documents": sample_document, "family": "entity"})
        assert response["error"]["code"] == -32001

    def test_batch_file_validate_success(self, server, sample_document, tmp_path):
        path = tmp_path / "documents.jsonl"
        path.write_text(json.dumps(sample_document) + "\n")

        response = call(server, "batch_file_validate", {"path": str(path), "family": "entity"})
        assert response["result"][0]["document_id"] == "TEST-001"

    def test_batch_file_validate_missing_file(self, server, tmp_path):
        response = call(
            server, "batch_file_validate", {"path": str(tmp_path / "missing.json"), "family": "entity"}
        )
        assert response["error"]["code"] == -32000
        assert "Failed to load documents" in response["error"]["message"]


class TestErrorLogMethod:
    """Test 'error_log' method."""

    def test_error_log_success(self, server, sample_document):
        report = call(server, "validate", {"family": "entity", "document": sample_document})["result"]
        response = call(server, "error_log", {"report": report})

        log = response["result"]["log"]
        assert "ID: V010" in log

    def test_error_log_missing_report(self, server):
        response = call(server, "error_log", {})
        assert response["error"]["code"] == -32001


class TestServerLoop:
    """Test the stdin/stdout loop."""

    def test_loop_answers_each_line(self, server, monkeypatch):
        requests = "\n".join([
            json.dumps({"jsonrpc": "2.0", "id": 1, "method": "discover_families", "params": {}}),
            "",
            json.dumps({"jsonrpc": "2.0", "id": 2, "method": "sample_document", "params": {"family": "go"}}),
        ]) + "\n"
        stdout = io.StringIO()
        monkeypatch.setattr("sys.stdin", io.StringIO(requests))
        monkeypatch.setattr("sys.stdout", stdout)
        # Keep the shared service open for other tests
        monkeypatch.setattr(server.service, "close", lambda: None)

        server.start_server()

        responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert [r["id"] for r in responses] == [1, 2]
        assert responses[1]["result"]["output"].startswith("Global Objective:")
