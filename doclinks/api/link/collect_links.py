"""Second-pass visitor: links and link references."""

from typing import Any

from ._constants import CONTENT_KEY, KIND_KEY, NODE_LINK, NODE_LINK_DEFINITION, NODE_LINK_REFERENCE
from .build_text import build_text
from .DocumentContext import DocumentContext
from .Link import Link
from .LinkKind import LinkKind


def collect_links(context: DocumentContext, node: dict[str, Any]) -> None:
    """Append the link carried by ``node``, if any, to ``context.links``."""
    kind = node.get(KIND_KEY)
    content = node.get(CONTENT_KEY)
    if not isinstance(content, list) or len(content) < 2:
        return

    if kind == NODE_LINK:
        # [attributes, inlines, [target, title]]; older trees omit attributes
        target = content[-1]
        if isinstance(target, list) and target and isinstance(target[0], str):
            context.links.append(Link(kind=LinkKind.DIRECT, text=build_text(content[-2]), href=target[0]))

    elif kind == NODE_LINK_REFERENCE:
        # [attributes, inlines, label]
        label = content[-1]
        if isinstance(label, str):
            context.links.append(Link(kind=LinkKind.REFERENCE_USE, text=build_text(content[-2]), label=label))

    elif kind == NODE_LINK_DEFINITION:
        # [label, [href, title]]
        label, target = content[0], content[-1]
        if isinstance(label, str) and isinstance(target, list) and target and isinstance(target[0], str):
            context.links.append(
                Link(kind=LinkKind.REFERENCE_DEFINITION, text=label, href=target[0], label=label)
            )
