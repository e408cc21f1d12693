"""Get sigscan home directory path or path under it."""

import os
from pathlib import Path

from ...constants import SIGSCAN_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get sigscan home directory path or path under it.

    Checks SIGSCAN_HOME environment variable first, defaults to ~/.sigscan if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to sigscan home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.sigscan")
        >>> get_home_dir("config.json")
        Path("/Users/user/.sigscan/config.json")
    """
    home_env = os.environ.get("SIGSCAN_HOME")
    if home_env:
        sigscan_home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        if user_home:
            sigscan_home = Path(user_home) / SIGSCAN_HOME_EXT
        else:
            sigscan_home = Path.home() / SIGSCAN_HOME_EXT

    return sigscan_home / Path(*parts) if parts else sigscan_home
