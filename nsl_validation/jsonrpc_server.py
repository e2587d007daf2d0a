#!/usr/bin/env python3
"""
JSON-RPC 2.0 Server for ValidationService

Provides a JSON-RPC interface to nsl-validation-lib, so an editor plugin or
a script in any language can lint NSL documents by spawning a process and
talking to it over stdin/stdout.

Protocol: JSON-RPC 2.0 over stdin/stdout (newline-delimited JSON)
Specification: https://www.jsonrpc.org/specification

Usage:
    python -m nsl_validation.jsonrpc_server [--debug] [--config PATH]

Example request (stdin):
    {"jsonrpc":"2.0","id":1,"method":"discover_families","params":{}}

Example response (stdout):
    {"jsonrpc":"2.0","id":1,"result":{"entity":{...},"go":{...}}}
"""

import sys
import json
import signal
import logging
import argparse
import traceback
from typing import Any, Dict, Optional

from nsl_validation import ValidationService

logger = logging.getLogger(__name__)


class ValidationJsonRpcServer:
    """JSON-RPC 2.0 server wrapping ValidationService API."""

    # JSON-RPC error codes
    ERROR_PARSE = -32700        # Invalid JSON
    ERROR_INVALID_REQUEST = -32600  # Invalid JSON-RPC structure
    ERROR_METHOD_NOT_FOUND = -32601  # Unknown method
    ERROR_INVALID_PARAMS = -32602   # Invalid parameters
    ERROR_INTERNAL = -32000      # Application error (catch-all)
    ERROR_VALIDATION = -32001    # Bad family, missing parameter (file load errors are -32000)

    def __init__(self, debug: bool = False, service: Optional[ValidationService] = None,
                 local_config_path: Optional[str] = None):
        """
        Initialize JSON-RPC server.

        Args:
            debug: Enable debug logging to stderr
            service: Existing ValidationService to wrap (one is created if omitted)
            local_config_path: local-config.yaml for the created service
        """
        self.service = service if service is not None else ValidationService(local_config_path)
        self.running = False
        self.debug = debug

        # Method dispatch table
        self.methods = {
            'validate': self._handle_validate,
            'discover_rules': self._handle_discover_rules,
            'discover_families': self._handle_discover_families,
            'batch_validate': self._handle_batch_validate,
            'batch_file_validate': self._handle_batch_file_validate,
            'error_log': self._handle_error_log,
            'sample_document': self._handle_sample_document,
        }

    def _log(self, message: str):
        """Log debug message to stderr (doesn't interfere with JSON-RPC on stdout)."""
        if self.debug:
            sys.stderr.write(f"[DEBUG] {message}\n")
            sys.stderr.flush()

    def start_server(self):
        """
        Start the JSON-RPC server loop.

        Reads requests from stdin, processes them, writes responses to stdout.
        Runs until EOF or stop signal received.
        """
        self.running = True
        self._log("ValidationService JSON-RPC server started")

        while self.running:
            try:
                line = sys.stdin.readline()

                if not line:
                    # EOF - clean shutdown
                    self._log("EOF received, shutting down")
                    break

                if not line.strip():
                    continue

                self._log(f"Received: {line.strip()}")
                response = self.handle_request(line)
                self._send_response(response)

            except KeyboardInterrupt:
                self._log("KeyboardInterrupt received, shutting down")
                break

            except Exception as e:
                # Fatal error in main loop
                self._log(f"Fatal error in main loop: {e}")
                traceback.print_exc(file=sys.stderr)
                break

        self.service.close()
        self._log("Server stopped")

    def stop_server(self):
        """Stop the server gracefully; the main loop exits after the current request."""
        self.running = False
        self._log("Stop signal received")

    def handle_request(self, request_json: str) -> Dict[str, Any]:
        """
        Parse and process a JSON-RPC request.

        Args:
            request_json: JSON-RPC request string

        Returns:
            JSON-RPC response dict (success or error)
        """
        request_id = None

        try:
            try:
                request = json.loads(request_json)
            except json.JSONDecodeError as e:
                return self._error_response(None, self.ERROR_PARSE,
                                            f"Parse error: {e}")

            if not isinstance(request, dict):
                return self._error_response(None, self.ERROR_INVALID_REQUEST,
                                            "Request must be a JSON object")

            if request.get("jsonrpc") != "2.0":
                return self._error_response(None, self.ERROR_INVALID_REQUEST,
                                            f"Invalid JSON-RPC version: {request.get('jsonrpc')}")

            request_id = request.get("id")
            method = request.get("method")
            params = request.get("params", {})

            if not method:
                return self._error_response(request_id, self.ERROR_INVALID_REQUEST,
                                            "Missing 'method' field")

            if method not in self.methods:
                return self._error_response(request_id, self.ERROR_METHOD_NOT_FOUND,
                                            f"Method not found: {method}")

            if not isinstance(params, dict):
                return self._error_response(request_id, self.ERROR_INVALID_PARAMS,
                                            f"Params must be an object, got {type(params).__name__}")

            self._log(f"Dispatching method: {method}")
            result = self.methods[method](params)

            return self._success_response(request_id, result)

        except ValueError as e:
            self._log(f"Validation error: {e}")
            return self._error_response(request_id, self.ERROR_VALIDATION, str(e))

        except Exception as e:
            logger.exception("Error processing JSON-RPC request")
            return self._error_response(request_id, self.ERROR_INTERNAL,
                                        f"Internal error: {e}")

    # Method handlers - wrap ValidationService API

    @staticmethod
    def _require(params: Dict[str, Any], name: str) -> Any:
        value = params.get(name)
        if value is None or value == "":
            raise ValueError(f"Missing required parameter: {name}")
        return value

    def _handle_validate(self, params: Dict[str, Any]) -> Any:
        """Handle 'validate' method."""
        family = self._require(params, 'family')
        document = self._require(params, 'document')
        if not isinstance(document, dict):
            raise ValueError("Parameter 'document' must be an object")
        return self.service.validate(family, document)

    def _handle_discover_rules(self, params: Dict[str, Any]) -> Any:
        """Handle 'discover_rules' method."""
        return self.service.discover_rules(self._require(params, 'family'))

    def _handle_discover_families(self, params: Dict[str, Any]) -> Any:
        """Handle 'discover_families' method."""
        # No parameters required
        return self.service.discover_families()

    def _handle_batch_validate(self, params: Dict[str, Any]) -> Any:
        """Handle 'batch_validate' method."""
        documents = self._require(params, 'documents')
        family = self._require(params, 'family')
        if not isinstance(documents, list):
            raise ValueError("Parameter 'documents' must be an array")
        return self.service.batch_validate(documents, family, params.get('id_field', 'id'))

    def _handle_batch_file_validate(self, params: Dict[str, Any]) -> Any:
        """Handle 'batch_file_validate' method."""
        path = self._require(params, 'path')
        family = self._require(params, 'family')
        return self.service.batch_file_validate(path, family, params.get('id_field', 'id'))

    def _handle_error_log(self, params: Dict[str, Any]) -> Any:
        """Handle 'error_log' method."""
        report = self._require(params, 'report')
        if not isinstance(report, dict):
            raise ValueError("Parameter 'report' must be an object")
        return {"log": self.service.error_log(report)}

    def _handle_sample_document(self, params: Dict[str, Any]) -> Any:
        """Handle 'sample_document' method."""
        return self.service.sample_document(self._require(params, 'family'))

    # Response formatting

    def _success_response(self, request_id: Any, result: Any) -> Dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "id": request_id,
            "result": result
        }

    def _error_response(self, request_id: Any, code: int, message: str,
                        data: Optional[Any] = None) -> Dict[str, Any]:
        error = {
            "code": code,
            "message": message
        }
        if data is not None:
            error["data"] = data

        return {
            "jsonrpc": "2.0",
            "id": request_id,
            "error": error
        }

    def _send_response(self, response: Dict[str, Any]):
        """Send JSON-RPC response to stdout."""
        response_json = json.dumps(response)
        self._log(f"Sending: {response_json}")
        sys.stdout.write(response_json + "\n")
        sys.stdout.flush()


def main():
    """Main entry point for JSON-RPC server."""
    parser = argparse.ArgumentParser(
        description="NSL ValidationService JSON-RPC 2.0 Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example usage:
  python -m nsl_validation.jsonrpc_server
  python -m nsl_validation.jsonrpc_server --debug

Supported methods:
  - validate              {family, document}
  - discover_rules        {family}
  - discover_families     {}
  - batch_validate        {documents, family, id_field?}
  - batch_file_validate   {path, family, id_field?}
  - error_log             {report}
  - sample_document       {family}

Protocol: JSON-RPC 2.0 over stdin/stdout
See: https://www.jsonrpc.org/specification
        """
    )
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging to stderr')
    parser.add_argument('--config', metavar='PATH', default=None,
                        help='Path to a local-config.yaml (defaults to the bundled one)')

    args = parser.parse_args()

    # Library log records go to stderr so stdout carries only JSON-RPC
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    server = ValidationJsonRpcServer(debug=args.debug, local_config_path=args.config)
    if args.debug:
        # Overrides log_level from local-config.yaml
        logging.getLogger("nsl_validation").setLevel(logging.DEBUG)

    # Handle signals for graceful shutdown
    def signal_handler(sig, frame):
        server.stop_server()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    # Start server (blocks until stopped)
    server.start_server()


if __name__ == "__main__":
    main()
