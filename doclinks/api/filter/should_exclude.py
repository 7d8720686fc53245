"""Decide whether a discovered filesystem entry is skipped."""

from collections.abc import Collection
from pathlib import Path

from ...constants import MARKUP_EXTENSION


def should_exclude(
    entry_path: Path,
    is_directory: bool,
    exclude_dirnames: Collection[str],
    root: Path | None = None,
    extension: str = MARKUP_EXTENSION,
) -> bool:
    """Return True if the entry must not be scanned.

    An entry is excluded when it is a directory, when one of the folders it
    lives in is named in ``exclude_dirnames``, or when its extension is not
    the markup extension.

    Only the folders below ``root`` are checked, so a scan started inside an
    excluded folder still sees its documents. Without a root every parent
    folder is checked.
    """
    if is_directory:
        return True

    folders = entry_path.parent.parts
    if root is not None:
        try:
            folders = entry_path.parent.relative_to(root).parts
        except ValueError:
            pass

    if any(name in exclude_dirnames for name in folders):
        return True

    return entry_path.suffix != extension
