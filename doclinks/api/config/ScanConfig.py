"""Scan configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ScanConfig(BaseModel):
    """Directory scan behaviour."""

    model_config = ConfigDict(extra="forbid")

    max_workers: int = Field(1, ge=1, description="Documents processed concurrently (1 = sequential)")
    follow_links: bool = Field(False, description="Descend into symlinked directories")
    heading_anchors: bool = Field(False, description="Treat heading identifiers as declared anchors")
