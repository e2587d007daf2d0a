"""
Document helper - read-only view of an NSL document for rules.

Rules never touch the caller's dict. The helper wraps a shallow copy in a
MappingProxyType and exposes the fields rules need by logical name:

- input  -> "input"  (raw value, any type)
- output -> "output" (raw value, any type)
- text   -> "output" when it is a string, else ""

With track_access=True every field read is recorded, which is how
discover_rules reports the fields each rule depends on.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Tuple

from jsonschema import Draft7Validator


# Auxiliary reference lists a caller may attach to a document.
REFERENCE_FIELDS = (
    "master_entities",
    "org_roles",
    "integration_systems",
    "actor_types",
    "business_functions",
    "industries",
    "approved_functions",
    "common_words",
)

REFERENCE_FIELDS_SCHEMA = {
    "type": "object",
    "properties": {
        name: {"type": "array", "items": {"type": "string", "minLength": 1}}
        for name in REFERENCE_FIELDS
    },
}


class NslDocument:
    """Helper class providing a stable, read-only interface to a document dict."""

    def __init__(self, data: Any, track_access: bool = False):
        self._data = MappingProxyType(dict(data) if isinstance(data, dict) else {})
        self._is_object = isinstance(data, dict)
        self._track_access = track_access
        self._accesses: dict = {}  # field -> None, ordered + deduplicated

    def _record_access(self, field_name: str):
        """Record field access for dependency tracking."""
        if self._track_access:
            self._accesses[field_name] = None

    def get_accesses(self) -> List[str]:
        """Return accessed field names, ordered by first access."""
        return list(self._accesses.keys())

    @property
    def is_object(self) -> bool:
        """Whether the caller supplied a dict at all."""
        return self._is_object

    @property
    def input(self) -> Any:
        self._record_access("input")
        return self._data.get("input")

    @property
    def output(self) -> Any:
        self._record_access("output")
        return self._data.get("output")

    @property
    def text(self) -> str:
        """The output notation, or "" when it is missing or not a string."""
        output = self.output
        return output if isinstance(output, str) else ""

    def get(self, field_name: str, default: Any = None) -> Any:
        self._record_access(field_name)
        return self._data.get(field_name, default)

    def reference_field_errors(self) -> List[Tuple[str, str]]:
        """
        Check auxiliary reference fields against REFERENCE_FIELDS_SCHEMA.

        Returns:
            List of (field, message) pairs, empty when every supplied list is
            well formed. Absent fields are fine.
        """
        supplied: Dict[str, Any] = {}
        for name in REFERENCE_FIELDS:
            if name in self._data:
                self._record_access(name)
                supplied[name] = self._data[name]

        validator = Draft7Validator(REFERENCE_FIELDS_SCHEMA)
        problems = []
        for error in sorted(validator.iter_errors(supplied), key=lambda e: [str(p) for p in e.path]):
            path = list(error.path)
            field_name = str(path[0]) if path else "document"
            problems.append((field_name, error.message))
        return problems


def is_reference_list(value: Any) -> bool:
    """True when value is usable as a reference list (list of non-empty strings)."""
    return isinstance(value, list) and all(isinstance(v, str) and v for v in value)
