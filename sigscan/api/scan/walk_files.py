"""Recursive enumeration of regular files under a root."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .TraversalError import TraversalError

logger = logging.getLogger(__name__)


def _raise_traversal_error(error: OSError) -> None:
    raise TraversalError(error.filename, error) from error


def walk_files(
    root: Path,
    follow_symlinks: bool = True,
    detect_cycles: bool = True,
) -> Iterator[Path]:
    """Yield every regular file reachable from ``root``.

    Symlinks to files are yielded, dangling symlinks are not. A root that is
    itself a regular file is yielded on its own.

    Args:
        root: Directory to walk
        follow_symlinks: Descend into symlinked directories
        detect_cycles: When following symlinks, never enter the same
            directory (device, inode) twice. Without it a symlink loop is
            walked until the OS refuses the path.

    Raises:
        TraversalError: If any directory, including the root, cannot be listed
    """
    root = Path(root)
    if root.is_file():
        yield root
        return

    guard = follow_symlinks and detect_cycles
    visited: set[tuple[int, int]] = set()
    if guard:
        try:
            st = root.stat()
        except OSError as exc:
            raise TraversalError(root, exc) from exc
        visited.add((st.st_dev, st.st_ino))

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_traversal_error, followlinks=follow_symlinks):
        if guard:
            kept = []
            for name in dirnames:
                child = os.path.join(dirpath, name)
                try:
                    st = os.stat(child)
                except OSError:
                    # os.walk reports it through onerror when listing it
                    kept.append(name)
                    continue
                key = (st.st_dev, st.st_ino)
                if key in visited:
                    logger.debug(f"Skipping already visited directory {child}")
                    continue
                visited.add(key)
                kept.append(name)
            dirnames[:] = kept

        for name in filenames:
            path = Path(dirpath) / name
            if path.is_file():
                yield path
