"""
Initialize the data_model sub module.
"""

from .documents import (
    DOCUMENT_TYPES,
    SAMPLE_INT_ARRAY,
    SAMPLE_STRING_ARRAY,
    ArrayDocument,
    IntArrayDocument,
    StringArrayDocument,
    parse_document,
)

__all__ = [
    "DOCUMENT_TYPES",
    "SAMPLE_INT_ARRAY",
    "SAMPLE_STRING_ARRAY",
    "ArrayDocument",
    "IntArrayDocument",
    "StringArrayDocument",
    "parse_document",
]
