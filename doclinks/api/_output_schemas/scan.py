"""Output schemas for scan commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ScanCheckOutput(BaseOutputSchema):
    """Output schema for scan check command."""

    root: str = Field(..., description="Directory that was scanned")
    files_scanned: int = Field(..., description="Number of documents that reached the reported state")
    files_failed: int = Field(..., description="Number of documents that could not be read or parsed")
    directories_failed: int = Field(..., description="Number of directories the walk could not list")
    links_checked: int = Field(..., description="Number of links verified")
    broken_count: int = Field(..., description="Number of broken links found")
    diagnostics: list[dict[str, Any]] = Field(..., description="Broken link findings (path, text, target, reason)")
    success: bool = Field(..., description="Whether no broken links and no processing errors were found")


class ScanShowOutput(BaseOutputSchema):
    """Output schema for scan show command."""

    path: str = Field(..., description="Document that was parsed")
    links: list[dict[str, Any]] = Field(..., description="Links found in document order (kind, text, target)")
    anchors: list[str] = Field(..., description="Declared anchors")
    node_kinds: dict[str, int] = Field(..., description="Count of nodes per kind tag")
    success: bool = Field(..., description="Whether the document was parsed")


register_output_schema("scan", "check", ScanCheckOutput)
register_output_schema("scan", "show", ScanShowOutput)
