"""Two-pass verification of one parsed document."""

from ..parser.ParsedDocument import ParsedDocument
from .collect_anchors import collect_anchors
from .collect_links import collect_links
from .Diagnostic import Diagnostic
from .DocumentContext import DocumentContext
from .Link import Link
from .LinkKind import LinkKind
from .resolve_references import resolve_references
from .verify_link import verify_link
from .walk import walk


def verify_document(context: DocumentContext, document: ParsedDocument) -> list[Diagnostic]:
    """Collect anchors, then links, then verify every link of ``document``.

    Fills ``context.anchors``, ``context.definitions`` and ``context.links``.
    Definitions from a backend reference table are verified once per label,
    after the links found in the tree, unless the tree already defines the
    same label.
    """
    context.references = document.references

    walk(document.blocks, collect_anchors, context)
    walk(document.blocks, collect_links, context)

    if document.references:
        context.links.extend(
            Link(kind=LinkKind.REFERENCE_DEFINITION, text=label, href=reference.href, label=label)
            for label, reference in document.references.items()
            if label not in context.definitions
        )

    references = resolve_references(context)
    diagnostics: list[Diagnostic] = []
    for link in context.links:
        diagnostic = verify_link(context, link, references)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
    return diagnostics
