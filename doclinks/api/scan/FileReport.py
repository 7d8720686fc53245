"""Terminal state of one scanned document."""

from dataclasses import dataclass, field
from pathlib import Path

from ..link.Diagnostic import Diagnostic


@dataclass
class FileReport:
    """Outcome of one document: its findings, or the error that aborted it.

    ``is_directory`` marks a directory the walk could not list; such a report
    only carries the error.
    """

    path: Path
    diagnostics: list[Diagnostic] = field(default_factory=list)
    links_checked: int = 0
    error: str | None = None
    is_directory: bool = False

    @property
    def failed(self) -> bool:
        return self.error is not None
