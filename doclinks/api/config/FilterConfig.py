"""Filter configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_EXCLUDE_DIRNAMES, MARKUP_EXTENSION


class FilterConfig(BaseModel):
    """Which filesystem entries are scanned."""

    model_config = ConfigDict(extra="forbid")

    extension: str = Field(MARKUP_EXTENSION, description="Markup file extension, including the dot")
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_DIRNAMES),
        description="Folder names whose contents are never scanned",
    )

    @field_validator("extension")
    @classmethod
    def _validate_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"extension must start with '.' (found: {value!r})")
        return value
