"""Scan driver: walk a tree and verify every document's links."""

from .check_document import check_document, read_document
from .FileReport import FileReport
from .iter_documents import iter_documents
from .ReadError import ReadError
from .scan_tree import scan_tree
from .UsageError import UsageError
from .validate_root import validate_root
from .WalkError import WalkError

__all__ = [
    "FileReport",
    "ReadError",
    "UsageError",
    "WalkError",
    "check_document",
    "iter_documents",
    "read_document",
    "scan_tree",
    "validate_root",
]
