"""Effective reference table of a document."""

from ..parser.Reference import Reference
from .DocumentContext import DocumentContext


def resolve_references(context: DocumentContext) -> dict[str, Reference] | None:
    """Return the table reference uses are resolved against.

    A table supplied by the parser backend is used as is. Otherwise the
    definitions found in the tree are used; with neither, there is no table
    and every reference use is broken. Labels match exactly.
    """
    if context.references is not None:
        return context.references
    if context.definitions:
        return dict(context.definitions)
    return None
