"""Unified logging configuration for sigscan."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import SIGSCAN_HOME_EXT

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(sigscan_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified sigscan logging.

    Args:
        sigscan_home: Path to sigscan home directory. If None, derived from environment.
        level: Name of the level for the ``sigscan`` logger (DEBUG, INFO, WARNING, ERROR)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if sigscan_home is None:
        env_home = os.environ.get("SIGSCAN_HOME")
        sigscan_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / SIGSCAN_HOME_EXT

    # Ensure directory exists
    sigscan_home.mkdir(parents=True, exist_ok=True)
    log_file = sigscan_home / "sigscan.log"

    root_logger = logging.getLogger("sigscan")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``sigscan`` hierarchy.

    Configures logging with defaults if nothing has yet; entry points should
    call ``configure_logging`` first.
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"sigscan.{name}")
