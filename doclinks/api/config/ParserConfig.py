"""Parser backend configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_PARSER_COMMAND, DEFAULT_PARSER_TIMEOUT_SECS


class ParserConfig(BaseModel):
    """External Markdown-to-JSON parser invocation."""

    model_config = ConfigDict(extra="forbid")

    command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PARSER_COMMAND),
        min_length=1,
        description="Command reading Markdown on stdin and writing a JSON tree on stdout",
    )
    timeout_secs: float = Field(DEFAULT_PARSER_TIMEOUT_SECS, gt=0, description="Per-document parser timeout")
