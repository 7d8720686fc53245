"""Walk error."""

from pathlib import Path

from ..DoclinksError import DoclinksError


class WalkError(DoclinksError):
    """A directory entry that could not be listed during the walk."""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path
