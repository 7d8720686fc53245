"""Config API module."""

from .ConfigError import ConfigError
from .DoclinksConfig import DoclinksConfig

__all__ = ["ConfigError", "DoclinksConfig"]
