"""Check the scan root before any scanning starts."""

from pathlib import Path

from .UsageError import UsageError


def validate_root(path: str | None) -> Path:
    """Return the scan root as an absolute path.

    Raises:
        UsageError: If no path is given or it is not a directory
    """
    if not path:
        raise UsageError("A directory to scan is required")
    root = Path(path).expanduser()
    if not root.is_dir():
        raise UsageError(f"The supplied path - {path} - is not a directory.")
    return root.absolute()
