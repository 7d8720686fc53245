"""Broken link finding."""

from dataclasses import dataclass
from pathlib import Path

from .DiagnosticReason import DiagnosticReason


@dataclass(frozen=True)
class Diagnostic:
    """One broken link in one document."""

    path: Path
    text: str
    target: str
    reason: DiagnosticReason

    def __str__(self) -> str:
        return f"{self.path}: Found {self.reason.description}: {self.text} - {self.target}"

    def to_dict(self) -> dict[str, str]:
        return {
            "path": str(self.path),
            "text": self.text,
            "target": self.target,
            "reason": self.reason.value,
        }
