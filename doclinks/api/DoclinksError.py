"""Base exception for doclinks."""


class DoclinksError(Exception):
    """Base class for every error raised by doclinks."""
