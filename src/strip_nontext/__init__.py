"""strip_nontext: reduce parsed document trees to narratable text."""

from strip_nontext.document import load_document, stringify
from strip_nontext.exceptions import DocumentError, StripNontextError
from strip_nontext.filter import (
    strip_nontext,
    strip_nontext_blocks,
    strip_nontext_with_report,
)
from strip_nontext.schemas import Document, FilterReport, Node
from strip_nontext.state import FilterOptions

__all__ = [
    "Document",
    "DocumentError",
    "FilterOptions",
    "FilterReport",
    "Node",
    "StripNontextError",
    "load_document",
    "stringify",
    "strip_nontext",
    "strip_nontext_blocks",
    "strip_nontext_with_report",
]
