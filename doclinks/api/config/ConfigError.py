"""Configuration error."""

from ..DoclinksError import DoclinksError


class ConfigError(DoclinksError):
    """Raised when the configuration file is unreadable or invalid."""
