"""
Fact extractors for NSL documents.

Pure, total functions that turn document text into structured facts for the
rules. Rules reach the document only through NslDocument.
"""

from .document import NslDocument, REFERENCE_FIELDS, is_reference_list
from .lines import find_line_number, line_of_offset, numbered_lines

__all__ = [
    'NslDocument',
    'REFERENCE_FIELDS',
    'is_reference_list',
    'find_line_number',
    'line_of_offset',
    'numbered_lines',
    'create_document_helper',
]


def create_document_helper(document_data, track_access: bool = False) -> NslDocument:
    """
    Factory for the read-only document view handed to rules.

    Args:
        document_data: Raw document (normally a dict with input/output)
        track_access: If True, record which fields rules read (for discover_rules)
    """
    return NslDocument(document_data, track_access=track_access)
