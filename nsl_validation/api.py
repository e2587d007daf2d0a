"""
Public API for nsl-validation-lib

This is the "front door" - the main entry point for all validation operations.
"""

import os
import json
import logging
import multiprocessing
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse, unquote

from .config_loader import ConfigLoader
from .report import format_error_log
from .validation_engine import ValidationEngine

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 50 * 1024 * 1024  # 50 MB

# ---------------------------------------------------------------------------
# Module-level worker state and task functions
#
# These must live at module level (not inside the class) so they are picklable
# by the multiprocessing 'spawn' context used for ProcessPoolExecutor workers.
# ---------------------------------------------------------------------------

# One ValidationService instance per worker process, created by _init_worker().
_worker_service: Optional["ValidationService"] = None


def _init_worker(local_config_path: Optional[str] = None) -> None:
    """
    Worker process initializer for ProcessPoolExecutor.

    Creates a single ValidationService in worker mode for this process, using
    the same local config as the parent service. Called once per worker
    process at pool creation time.
    """
    global _worker_service
    _worker_service = ValidationService(local_config_path, _worker_mode=True)


def _validate_document(document: dict, family: str, id_field: str) -> dict:
    """
    Per-document validation task executed in a worker process.

    Args:
        document: Document dict ("input", "output", optional reference lists).
        family: Rule family to run.
        id_field: Field name used as the document identifier.

    Returns:
        Per-document result dict with document_id, family and report.
    """
    assert _worker_service is not None, (
        "_validate_document called outside a worker process; "
        "_worker_service was not initialised by _init_worker()"
    )
    return _worker_service._validate_one(document, family, id_field)


class ValidationService:
    """
    Main validation service class.

    Lints NSL documents (entity models, global objectives, tenants and local
    objectives) against the rule families defined in business-config.yaml.

    Example:
        from nsl_validation import ValidationService

        service = ValidationService()
        report = service.validate("entity", {
            "input": "Model customers",
            "output": "Customer has customerId^PK, name.",
        })
        print(report["summary"]["pass_rate"])

        # Plain-text log of the failures
        print(service.error_log(report))
    """

    def __init__(self, local_config_path: Optional[str] = None, _worker_mode: bool = False):
        """
        Initialize validation service.

        The service:
        1. Loads local-config.yaml (bundled unless a path is given)
        2. Loads and checks business-config.yaml
        3. Builds the rule registry through the validation engine
        4. Creates the worker process pool if batch_parallelism is enabled
           (skipped when _worker_mode=True)

        Args:
            local_config_path: Optional path to a local-config.yaml
            _worker_mode: Internal flag, set True only by _init_worker() when
                creating a ValidationService inside a pool worker process.

        Raises:
            ValueError: If the business config is invalid
            ImportError: If a configured rule module does not exist
        """
        self._worker_mode = _worker_mode
        self._pool: Optional[ProcessPoolExecutor] = None
        self._initialize(local_config_path)
        self._create_pool()

    def _initialize(self, local_config_path: Optional[str]):
        self.config_loader = ConfigLoader(local_config_path)

        # Level for the whole nsl_validation logger hierarchy
        logging.getLogger("nsl_validation").setLevel(self.config_loader.get_log_level())

        self.engine = ValidationEngine(config_loader=self.config_loader)

    def _create_pool(self) -> None:
        """
        Create the ProcessPoolExecutor worker pool for batch validation.

        No-op when:
        - Running in worker mode (_worker_mode=True)
        - batch_parallelism is false in local-config.yaml

        Uses an explicit 'spawn' context so workers start from a clean
        interpreter on every platform. Workers are not spawned until the first
        submit() call.
        """
        if self._worker_mode:
            return
        if not self.config_loader.get_batch_parallelism():
            return
        max_workers = self.config_loader.get_batch_max_workers()
        ctx = multiprocessing.get_context("spawn")
        self._pool = ProcessPoolExecutor(
            max_workers=max_workers,  # None → os.cpu_count()
            mp_context=ctx,
            initializer=_init_worker,
            initargs=(self.config_loader.local_config_path,),
        )
        logger.debug(
            f"Batch worker pool created (max_workers={max_workers or os.cpu_count()})"
        )

    def validate(self, family: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate a single document against every rule of a family.

        Args:
            family: Rule family ("entity", "go", "tenant" or "lo")
            document: Dict with "input" and "output" strings, plus any optional
                reference lists (master_entities, org_roles, ...)

        Returns:
            Report dict:
                - family: The family that was run
                - results: One row per rule, in registry order, each with
                  rule_id, description, section, status ("PASS", "FAIL" or
                  "ERROR"), passed, details, line and lines
                - summary: total, pass, fail and pass_rate (0-100)

        Raises:
            ValueError: If family is unknown

        Example:
            report = service.validate("tenant", {"input": "", "output": text})
            for row in report["results"]:
                if not row["passed"]:
                    print(f"{row['rule_id']} line {row['line']}: {row['details']}")
        """
        return self.engine.validate(family, document)

    def discover_rules(self, family: str) -> Dict[str, Dict]:
        """
        Discover the rules of a family.

        Args:
            family: Rule family to query

        Returns:
            Dict mapping rule_id to rule metadata:
                - rule_id, family, section, description
                - required_data: Reference lists the rule consults
                - field_dependencies: Document fields the rule reads
                - disabled: True for placeholder checks

        Raises:
            ValueError: If family is unknown
        """
        return self.engine.discover_rules(family)

    def discover_families(self) -> Dict[str, Dict]:
        """
        Discover all available families with metadata and statistics.

        Returns:
            Dict mapping family to:
                - metadata: Family metadata (description, purpose, version)
                - stats: total_rules, rules_by_section, disabled_rules, required_data

        Example:
            for name, info in service.discover_families().items():
                print(f"{name}: {info['stats']['total_rules']} rules")
        """
        return self.engine.discover_families()

    def batch_validate(
        self, documents: List[Dict[str, Any]], family: str, id_field: str = "id"
    ) -> List[Dict[str, Any]]:
        """
        Validate multiple documents of one family.

        Args:
            documents: List of document dicts
            family: Rule family to run for every document
            id_field: Document field used as the identifier in results

        Returns:
            List of per-document results, in input order, each containing:
                - document_id: Value of id_field, or "unknown"
                - family: The family that was run
                - report: Report dict (same format as validate())

        Raises:
            ValueError: If family is unknown
        """
        # Fail fast on a bad family before any work is distributed
        self.engine.get_required_data(family)

        if self._pool is not None:
            # Futures are submitted and collected in input order, preserving
            # result ordering regardless of which worker finishes first.
            futures = [
                self._pool.submit(_validate_document, document, family, id_field)
                for document in documents
            ]
            return [f.result() for f in futures]

        return [self._validate_one(document, family, id_field) for document in documents]

    def batch_file_validate(self, path: str, family: str, id_field: str = "id") -> List[Dict[str, Any]]:
        """
        Validate documents loaded from a file.

        Supported formats:
        - .json: a single document object or an array of documents
        - .jsonl: one document object per line (blank lines ignored)

        Args:
            path: Plain filesystem path or file:// URI
            family: Rule family to run
            id_field: Document field used as the identifier in results

        Returns:
            List of per-document results (same format as batch_validate())

        Raises:
            ValueError: If family is unknown
            RuntimeError: If the file cannot be loaded

        Example:
            results = service.batch_file_validate("file:///data/tenants.jsonl", "tenant")
        """
        documents = self._load_documents_from_file(path)
        return self.batch_validate(documents, family, id_field)

    def error_log(self, report: Dict[str, Any]) -> str:
        """
        Render a report's failed rules as a plain-text error log.

        Returns:
            Text with a header, date, summary line and one block per failure
        """
        return format_error_log(report)

    def sample_document(self, family: str) -> Dict[str, Any]:
        """
        Bundled sample document for a family. The sample passes every rule.

        Raises:
            ValueError: If family is unknown
        """
        return self.engine.sample_document(family)

    def close(self) -> None:
        """
        Shut down the worker process pool cleanly.

        Safe to call multiple times or when batch_parallelism is disabled.

        Example:
            service = ValidationService()
            try:
                results = service.batch_validate(documents, "entity")
            finally:
                service.close()
        """
        if self._pool is not None:
            self._pool.shutdown(wait=True)
            self._pool = None

    def _validate_one(self, document: Dict[str, Any], family: str, id_field: str) -> Dict[str, Any]:
        return {
            "document_id": self._extract_id(document, id_field),
            "family": family,
            "report": self.engine.validate(family, document),
        }

    def _extract_id(self, document, id_field):
        """
        Extract document identifier.

        Returns:
            String identifier, or "unknown" when the field is absent
        """
        if isinstance(document, dict) and document.get(id_field) is not None:
            return str(document[id_field])
        return "unknown"

    def _load_documents_from_file(self, path):
        """
        Load documents from a .json or .jsonl file.

        Args:
            path: Plain path or file:// URI

        Returns:
            List of document dicts

        Raises:
            RuntimeError: If file loading or parsing fails
        """
        parsed = urlparse(path)

        try:
            if parsed.scheme == "file":
                file_path = Path(unquote(parsed.path)).resolve()
            elif not parsed.scheme:
                file_path = Path(path).resolve()
            else:
                raise ValueError(f"Unsupported URI scheme: {parsed.scheme}")

            if not file_path.is_file():
                raise ValueError(f"File not found or not a regular file: {file_path}")
            if file_path.stat().st_size > MAX_FILE_SIZE:
                raise RuntimeError(
                    f"File exceeds {MAX_FILE_SIZE // (1024 * 1024)} MB limit: {file_path}"
                )

            with open(file_path, encoding="utf-8") as f:
                if file_path.suffix.lower() == ".jsonl":
                    data = [json.loads(line) for line in f if line.strip()]
                else:
                    data = json.load(f)

            # Handle both single document and list of documents
            documents = data if isinstance(data, list) else [data]
            for index, document in enumerate(documents):
                if not isinstance(document, dict):
                    raise ValueError(
                        f"Entry {index} is a {type(document).__name__}, expected an object"
                    )

            logger.debug(
                "Documents loaded from file",
                extra={"path": str(file_path), "count": len(documents)},
            )
            return documents

        except RuntimeError:
            raise
        except Exception as e:
            raise RuntimeError(f"Failed to load documents from {path}: {e}") from e
