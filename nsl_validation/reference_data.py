"""
Reference Data Proxy

Provides the auxiliary reference lists that validation rules ask for through
required_data(): master entity names, organisational roles, integration
systems and so on.

Resolution order for each term:
1. The document's own field, when it is a list of non-empty strings
2. The default list under reference_data in business-config.yaml
3. None, which the consuming rule treats as "not supplied"

A malformed list in the document is ignored here; the Required Format rules
report it.
"""

import logging
from typing import Any, Dict, List, Optional

from .logic.extractors import is_reference_list

logger = logging.getLogger(__name__)


class ReferenceDataProxy:
    """Resolves reference-list vocabulary terms for a document."""

    def __init__(self, defaults: Dict[str, List[str]]):
        """
        Args:
            defaults: Term -> default list, from the business config
        """
        self.defaults = {term: list(values) for term, values in (defaults or {}).items()}

    def get_reference_data(
        self,
        family: str,
        document: Any,
        vocabulary_terms: List[str],
    ) -> Dict[str, Optional[List[str]]]:
        """
        Resolve reference lists for a document.

        Args:
            family: Rule family being run (for logging)
            document: The caller's document (normally a dict)
            vocabulary_terms: Terms the family's rules declared via required_data()

        Returns:
            Dict mapping every requested term to a list, or None when neither
            the document nor the defaults supply it
        """
        resolved: Dict[str, Optional[List[str]]] = {}
        sources = {}
        for term in vocabulary_terms:
            value = document.get(term) if isinstance(document, dict) else None
            if is_reference_list(value):
                resolved[term] = list(value)
                sources[term] = "document"
            elif term in self.defaults:
                resolved[term] = list(self.defaults[term])
                sources[term] = "default"
            else:
                resolved[term] = None
                sources[term] = "missing"

        logger.debug(
            "Reference data resolved",
            extra={"family": family, "sources": sources},
        )
        return resolved
