"""First-pass visitor: declared anchors and in-document reference definitions."""

from typing import Any

from ..parser.Reference import Reference
from ._constants import (
    CONTENT_KEY,
    KIND_KEY,
    NAMED_ANCHOR_PATTERN,
    NODE_HEADER,
    NODE_LINK_DEFINITION,
    NODE_RAW_INLINE,
    RAW_HTML_FORMAT,
)
from .DocumentContext import DocumentContext


def collect_anchors(context: DocumentContext, node: dict[str, Any]) -> None:
    """Record anchors declared by ``node`` in ``context``.

    Must see the whole tree before any link is verified, since a link may
    precede the anchor it points to.
    """
    kind = node.get(KIND_KEY)
    content = node.get(CONTENT_KEY)

    if kind == NODE_RAW_INLINE:
        # ["html", "<a name=\"x\"></a>"]
        if isinstance(content, list) and len(content) == 2 and content[0] == RAW_HTML_FORMAT:
            html = content[1]
            if isinstance(html, str):
                context.anchors.extend(f"#{m.group(1)}" for m in NAMED_ANCHOR_PATTERN.finditer(html))

    elif kind == NODE_LINK_DEFINITION:
        definition = _definition(content)
        if definition is not None:
            label, reference = definition
            context.definitions.setdefault(label, reference)

    elif kind == NODE_HEADER and context.heading_anchors:
        # [level, [identifier, classes, attributes], inlines]
        if isinstance(content, list) and len(content) >= 2 and isinstance(content[1], list) and content[1]:
            identifier = content[1][0]
            if isinstance(identifier, str) and identifier:
                context.anchors.append(f"#{identifier}")


def _definition(content: Any) -> tuple[str, Reference] | None:
    # [label, [href, title]]
    if not (isinstance(content, list) and len(content) >= 2 and isinstance(content[0], str)):
        return None
    target = content[-1]
    if not (isinstance(target, list) and target and isinstance(target[0], str)):
        return None
    title = target[1] if len(target) > 1 and isinstance(target[1], str) else ""
    return content[0], Reference(href=target[0], title=title)
