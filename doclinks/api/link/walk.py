"""Generic depth-first traversal over a parsed document tree."""

from collections.abc import Callable
from typing import Any, TypeVar

from ._constants import CONTENT_KEY, KIND_KEY

C = TypeVar("C")


def walk(
    node: Any,
    visitor: Callable[[C, dict[str, Any]], None],
    context: C,
    kind_key: str = KIND_KEY,
    content_key: str = CONTENT_KEY,
) -> None:
    """Visit every structural node reachable from ``node`` in pre-order.

    Lists are walked element by element. A dict carrying a kind tag or a
    content field is passed to ``visitor`` before its content is walked, when
    that content is a list. Anything else is a leaf, so no node arity or
    field layout is assumed. Nesting depth is bounded only by memory.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, list):
            # Reversed so the first child is popped first
            stack.extend(reversed(current))
        elif isinstance(current, dict) and (kind_key in current or content_key in current):
            visitor(context, current)
            content = current.get(content_key)
            if isinstance(content, list):
                stack.append(content)
