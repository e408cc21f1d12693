"""Get path to the sigscan config file."""

from pathlib import Path

from .get_home_dir import get_home_dir


def get_config_path() -> Path:
    """Get path to config file based on SIGSCAN_HOME or default to ~/.sigscan."""
    return get_home_dir("config.json")
