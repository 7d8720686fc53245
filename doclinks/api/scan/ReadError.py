"""Read error."""

from ..DoclinksError import DoclinksError


class ReadError(DoclinksError):
    """Raised when a document cannot be opened or decoded."""
