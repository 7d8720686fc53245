"""Link extraction and verification over parsed document trees."""

from .build_text import build_text
from .collect_anchors import collect_anchors
from .collect_links import collect_links
from .Diagnostic import Diagnostic
from .DiagnosticReason import DiagnosticReason
from .DocumentContext import DocumentContext
from .Link import Link
from .LinkKind import LinkKind
from .resolve_references import resolve_references
from .verify_document import verify_document
from .verify_link import verify_link
from .walk import walk

__all__ = [
    "Diagnostic",
    "DiagnosticReason",
    "DocumentContext",
    "Link",
    "LinkKind",
    "build_text",
    "collect_anchors",
    "collect_links",
    "resolve_references",
    "verify_document",
    "verify_link",
    "walk",
]
