"""Backend-independent parse result."""

from dataclasses import dataclass, field
from typing import Any

from .Reference import Reference


@dataclass
class ParsedDocument:
    """Block list of a document plus the reference table, when the backend has one."""

    blocks: list[Any]
    references: dict[str, Reference] | None = None
    meta: dict[str, Any] = field(default_factory=dict)
