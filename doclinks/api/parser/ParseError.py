"""Parse error."""

from ..DoclinksError import DoclinksError


class ParseError(DoclinksError):
    """Raised when the parser fails or returns a tree of unknown shape."""
