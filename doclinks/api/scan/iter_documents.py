"""Enumerate the documents below a scan root."""

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from ..config.FilterConfig import FilterConfig
from ..filter.should_exclude import should_exclude
from .WalkError import WalkError

logger = logging.getLogger(__name__)


def iter_documents(
    root: Path,
    filter_config: FilterConfig,
    follow_links: bool = False,
    on_error: Callable[[WalkError], None] | None = None,
) -> Iterator[Path]:
    """Yield every file below ``root`` that the path filter accepts.

    Directories that cannot be listed are reported to ``on_error`` and
    skipped; the walk continues with the next entry.
    """
    exclude_dirnames = set(filter_config.exclude_dirnames)

    def _onerror(exc: OSError) -> None:
        error = WalkError(Path(exc.filename or root), exc.strerror or str(exc))
        logger.error("Cannot list %s: %s", error.path, error)
        if on_error is not None:
            on_error(error)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_onerror, followlinks=follow_links):
        # Nothing below an excluded folder is scanned
        dirnames[:] = sorted(d for d in dirnames if d not in exclude_dirnames)
        current = Path(dirpath)
        for name in sorted(filenames):
            entry = current / name
            if should_exclude(entry, False, exclude_dirnames, root=root, extension=filter_config.extension):
                continue
            yield entry
