"""Usage error."""

from ..DoclinksError import DoclinksError


class UsageError(DoclinksError):
    """Raised for a bad scan argument, before any scanning starts."""
