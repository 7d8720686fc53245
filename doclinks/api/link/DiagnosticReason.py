"""Categories of broken links."""

from enum import Enum


class DiagnosticReason(str, Enum):
    """Why a link is broken."""

    BROKEN_ANCHOR = "broken_anchor"
    BROKEN_FILESYSTEM = "broken_filesystem"
    BROKEN_REFERENCE = "broken_reference"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    DiagnosticReason.BROKEN_ANCHOR: "broken relative (anchor) link",
    DiagnosticReason.BROKEN_FILESYSTEM: "broken relative (filesystem) link",
    DiagnosticReason.BROKEN_REFERENCE: "broken reference link",
}
