"""Shared constants for doclinks."""

# Home directory (config.json, doclinks.log) when DOCLINKS_HOME is unset
DOCLINKS_HOME_EXT = ".doclinks"
DOCLINKS_HOME_ENV = "DOCLINKS_HOME"

MARKUP_EXTENSION = ".md"

DEFAULT_EXCLUDE_DIRNAMES = [
    "build",
    "build_nodejs",
    "node_modules",
    ".git",
]

DEFAULT_PARSER_COMMAND = ["pandoc", "-f", "markdown", "-t", "json"]
DEFAULT_PARSER_TIMEOUT_SECS = 30.0

# Hrefs starting with any of these are assumed valid (http covers https)
EXTERNAL_PREFIXES = ("http", "mailto")
