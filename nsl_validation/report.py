"""
Report assembly and the plain-text error log.

A report is a plain dict so it serialises straight to JSON:

    {
        "family": "entity",
        "results": [RuleResult, ...],
        "summary": {"total": 10, "pass": 7, "fail": 3, "pass_rate": 70}
    }

ERROR rows count as failures. pass_rate is rounded half-up and is 100 for an
empty family.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

ERROR_LOG_TITLE = "NSL Validation Error Log"


def pass_rate(passed: int, total: int) -> int:
    """round-half-up(100 * passed / total), 100 when total is 0."""
    if total == 0:
        return 100
    return (200 * passed + total) // (2 * total)


def summarize(results: List[Dict[str, Any]]) -> Dict[str, int]:
    total = len(results)
    passed = sum(1 for result in results if result["passed"])
    return {
        "total": total,
        "pass": passed,
        "fail": total - passed,
        "pass_rate": pass_rate(passed, total),
    }


def build_report(family: str, results: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "family": family,
        "results": results,
        "summary": summarize(results),
    }


def format_error_log(report: Dict[str, Any], generated_at: Optional[datetime] = None) -> str:
    """
    Render the failed rules of a report as a plain-text log.

    Args:
        report: Report dict as returned by ValidationEngine.validate()
        generated_at: Timestamp for the Date line (defaults to now, UTC)

    Returns:
        Text with a header, date, summary line and one block per failed rule
    """
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)

    summary = report.get("summary") or summarize(report.get("results", []))
    family = report.get("family", "")

    title = f"{ERROR_LOG_TITLE} ({family})" if family else ERROR_LOG_TITLE
    out = [
        title,
        "=" * len(title),
        "",
        f"Date: {generated_at.isoformat()}",
        f"Summary: {summary['fail']} validation(s) failed. Pass rate: {summary['pass_rate']}%",
        "",
        "Failed Validations:",
        "-------------------",
        "",
    ]

    for result in report.get("results", []):
        if result.get("passed"):
            continue
        out.append(f"ID: {result['rule_id']}")
        out.append(f"Section: {result['section']}")
        out.append(f"Description: {result['description']}")
        if result.get("line"):
            out.append(f"Line: {result['line']}")
            lines = result.get("lines") or []
            if len(lines) > 1:
                out.append(f"All Lines: {', '.join(str(n) for n in lines)}")
        out.append(f"Details: {result['details']}")
        out.append("")

    return "\n".join(out)
