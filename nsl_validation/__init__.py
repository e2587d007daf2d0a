"""
nsl-validation-lib: Rule-based linter for NSL notation

Checks LLM-generated NSL documents (entity models, global objectives,
tenants and local objectives) against families of independent rules:
- Registry of rule families defined in business-config.yaml
- One module per rule, each returning PASS or FAIL with line hints
- Per-rule error isolation and a summarised report
- Plain-text error log export
- JSON-RPC 2.0 stdio server

Example:
    from nsl_validation import ValidationService

    service = ValidationService()
    report = service.validate("entity", {"input": prompt, "output": notation})
"""

from .api import ValidationService

__version__ = "0.1.0"
__all__ = ["ValidationService"]
