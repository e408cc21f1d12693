"""Delete matched files."""

import logging
from collections.abc import Iterable
from pathlib import Path

from .RemediationError import RemediationError

logger = logging.getLogger(__name__)


def remove_files(paths: Iterable[Path]) -> list[Path]:
    """Delete each path that still exists, in order.

    A path that is already gone is skipped. The first other failure stops the
    removal; nothing is restored.

    Returns:
        Paths that were deleted

    Raises:
        RemediationError: On the first deletion failure, listing the paths
            deleted before it
    """
    removed: list[Path] = []
    for path in paths:
        path = Path(path)
        if not path.exists() and not path.is_symlink():
            continue
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        except OSError as exc:
            logger.error(f"Failed to remove {path}: {exc}")
            raise RemediationError(path, exc, removed) from exc
        logger.info(f"Removed {path}")
        removed.append(path)
    return removed
