"""Per-document scratch state threaded through both traversal passes."""

from dataclasses import dataclass, field
from pathlib import Path

from ..parser.Reference import Reference
from .Link import Link


@dataclass
class DocumentContext:
    """State for one document; created per file and discarded after reporting."""

    path: Path
    anchors: list[str] = field(default_factory=list)
    references: dict[str, Reference] | None = None
    definitions: dict[str, Reference] = field(default_factory=dict)
    links: list[Link] = field(default_factory=list)
    heading_anchors: bool = False
