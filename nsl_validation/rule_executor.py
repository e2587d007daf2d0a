import logging
import time
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .logic.extractors import create_document_helper
from .logic.extractors.lines import unique_lines
from .rule_loader import RuleEntry

logger = logging.getLogger(__name__)

PASSED_DETAILS = "Validation passed"
FAILED_DETAILS = "Validation failed"


class RuleExecutor:
    """Runs a family's rules against one document, isolating each rule's failures"""

    def __init__(self, entries: Sequence[RuleEntry], document: Any, reference_data: Dict[str, Any]):
        """
        Initialize rule executor.

        Args:
            entries: Registry entries to run, in order
            document: The caller's document (never mutated, not retained after execute())
            reference_data: Resolved reference lists, term -> list or None
        """
        self.entries = entries
        self.document = create_document_helper(document, track_access=False)
        self.reference_data = reference_data

    def execute(self) -> List[Dict[str, Any]]:
        """
        Execute every rule in registry order.

        Returns:
            One result row per rule:
            {
                "rule_id": str,
                "description": str,
                "section": str,
                "status": "PASS" | "FAIL" | "ERROR",
                "passed": bool,
                "details": str,
                "line": int | None,
                "lines": [int, ...]
            }
        """
        return [self._execute_rule(entry) for entry in self.entries]

    def _execute_rule(self, entry: RuleEntry) -> Dict[str, Any]:
        description = ""
        start = time.time()
        try:
            rule = entry.instantiate()
            description = rule.description()

            # Inject document helper and reference lists
            rule.document = self.document
            rule.set_required_data({k: self.reference_data.get(k) for k in rule.required_data()})

            status, message, lines = self._unpack(rule.run())
        except Exception as e:
            logger.warning(
                "Rule raised during execution",
                extra={"rule_id": entry.rule_id, "error_type": type(e).__name__},
            )
            status = "ERROR"
            message = f"Validator error: {str(e) or type(e).__name__}"
            lines = []
        elapsed_ms = round((time.time() - start) * 1000, 2)

        logger.debug(
            "Rule executed",
            extra={"rule_id": entry.rule_id, "status": status, "execution_time_ms": elapsed_ms},
        )

        passed = status == "PASS"
        return {
            "rule_id": entry.rule_id,
            "description": description,
            "section": entry.section,
            "status": status,
            "passed": passed,
            "details": message or (PASSED_DETAILS if passed else FAILED_DETAILS),
            "line": lines[0] if lines else None,
            "lines": lines,
        }

    @staticmethod
    def _unpack(outcome: Any) -> Tuple[str, str, List[int]]:
        """Normalise ("PASS"|"FAIL", message[, lines]) into a 3-tuple."""
        if not isinstance(outcome, tuple) or len(outcome) not in (2, 3):
            raise TypeError(f"rule returned {outcome!r}, expected (status, message[, lines])")

        status, message = outcome[0], outcome[1]
        lines: Optional[list] = outcome[2] if len(outcome) == 3 else None
        if status not in ("PASS", "FAIL"):
            raise ValueError(f"rule returned unknown status {status!r}")
        return status, str(message or ""), unique_lines(list(lines or []))
