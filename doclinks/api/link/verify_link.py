"""Classify a link and check its target."""

import os
from urllib.parse import unquote

from ...constants import EXTERNAL_PREFIXES
from ..parser.Reference import Reference
from .Diagnostic import Diagnostic
from .DiagnosticReason import DiagnosticReason
from .DocumentContext import DocumentContext
from .Link import Link
from .LinkKind import LinkKind


def verify_link(
    context: DocumentContext,
    link: Link,
    references: dict[str, Reference] | None = None,
) -> Diagnostic | None:
    """Return a Diagnostic if ``link`` is broken, None otherwise.

    ``references`` is the effective reference table (see resolve_references).
    """
    if link.kind is LinkKind.REFERENCE_USE:
        if references is not None and link.label in references:
            return None
        return _diagnostic(context, link, DiagnosticReason.BROKEN_REFERENCE)

    href = link.href or ""

    if href.startswith("#"):
        if href in context.anchors:
            return None
        return _diagnostic(context, link, DiagnosticReason.BROKEN_ANCHOR)

    # Prefix match: anything starting with "http" (https, malformed http:/x) or "mailto"
    if href.startswith(EXTERNAL_PREFIXES):
        return None

    if _exists_relative_to(context, href):
        return None
    return _diagnostic(context, link, DiagnosticReason.BROKEN_FILESYSTEM)


def _exists_relative_to(context: DocumentContext, href: str) -> bool:
    # The fragment names a place inside the target; only the target must exist
    path_part = href.split("#", 1)[0]
    base = os.path.dirname(os.path.abspath(context.path))
    candidate = os.path.join(base, path_part)
    if os.path.exists(candidate):
        return True
    decoded = unquote(candidate)
    return decoded != candidate and os.path.exists(decoded)


def _diagnostic(context: DocumentContext, link: Link, reason: DiagnosticReason) -> Diagnostic:
    return Diagnostic(path=context.path, text=link.text, target=link.target, reason=reason)
