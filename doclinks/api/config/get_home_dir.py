"""Get doclinks home directory path or path under it."""

import os
from pathlib import Path

from ...constants import DOCLINKS_HOME_ENV, DOCLINKS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get doclinks home directory path or path under it.

    Checks DOCLINKS_HOME environment variable first, defaults to ~/.doclinks.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.doclinks")
        >>> get_home_dir("config.json")
        Path("/Users/user/.doclinks/config.json")
    """
    home_env = os.environ.get(DOCLINKS_HOME_ENV)
    home = Path(home_env).expanduser().resolve() if home_env else Path.home() / DOCLINKS_HOME_EXT
    return home / Path(*parts) if parts else home
