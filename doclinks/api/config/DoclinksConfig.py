"""Top-level doclinks configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ConfigError import ConfigError
from .FilterConfig import FilterConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .ParserConfig import ParserConfig
from .ScanConfig import ScanConfig


class DoclinksConfig(BaseModel):
    """Top-level configuration; every section has defaults."""

    model_config = ConfigDict(extra="forbid")

    filter: FilterConfig = Field(default_factory=FilterConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on DOCLINKS_HOME or default to ~/.doclinks."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls, path: Path | None = None) -> "DoclinksConfig":
        """Load and validate config from file.

        A missing file is not an error: the defaults are returned.

        Raises:
            ConfigError: If the file holds invalid JSON or fails validation
        """
        path = path or cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must hold a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a dictionary for serialization."""
        return {
            "filter": self.filter.model_dump(),
            "parser": self.parser.model_dump(),
            "scan": self.scan.model_dump(),
            "log": self.log.model_dump(),
        }
