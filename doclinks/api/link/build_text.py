"""Render the display text of a link."""

from typing import Any

from ._constants import CONTENT_KEY, KIND_KEY, NODE_CODE, NODE_STR, SPACE_NODES
from .walk import walk


def build_text(inlines: Any) -> str:
    """Concatenate the text leaves under ``inlines`` in document order.

    Space-like nodes render as a single space.
    """
    parts: list[str] = []
    walk(inlines, _collect_text, parts)
    return "".join(parts)


def _collect_text(parts: list[str], node: dict[str, Any]) -> None:
    kind = node.get(KIND_KEY)
    content = node.get(CONTENT_KEY)
    if kind in SPACE_NODES:
        parts.append(" ")
    elif kind == NODE_STR and isinstance(content, str):
        parts.append(content)
    elif kind == NODE_CODE and isinstance(content, list) and content and isinstance(content[-1], str):
        parts.append(content[-1])
