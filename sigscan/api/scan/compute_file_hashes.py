"""Concurrent hashing of every file under a root."""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from ...constants import HASH_CHUNK_SIZE
from .compute_file_sha1 import compute_file_sha1
from .ProgressState import ProgressState
from .ScanJoinError import ScanJoinError
from .walk_files import walk_files

logger = logging.getLogger(__name__)


def compute_file_hashes(
    root: Path,
    progress: ProgressState,
    *,
    max_workers: int | None = None,
    chunk_size: int = HASH_CHUNK_SIZE,
    follow_symlinks: bool = True,
    detect_cycles: bool = True,
) -> dict[str, Path]:
    """Hash every regular file under ``root`` on a worker pool.

    ``progress.discovered`` grows as files are found, ``progress.completed``
    as they are hashed. Files that cannot be read are skipped. When two files
    share a digest, the path hashed last is kept.

    Returns:
        Mapping of lowercase hex SHA-1 digest to file path

    Raises:
        TraversalError: If a directory cannot be listed
        ScanJoinError: If a hashing task fails unexpectedly
    """
    hashes: dict[str, Path] = {}
    hashes_lock = threading.Lock()

    def _hash_one(path: Path) -> None:
        try:
            digest = compute_file_sha1(path, chunk_size)
        except OSError as exc:
            logger.debug(f"Skipping unreadable file {path}: {exc}")
            return
        with hashes_lock:
            hashes[digest] = path
        progress.add_completed()

    futures: list[Future] = []
    executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="sigscan-hash")
    try:
        for path in walk_files(root, follow_symlinks=follow_symlinks, detect_cycles=detect_cycles):
            progress.add_discovered()
            futures.append(executor.submit(_hash_one, path))

        for future in futures:
            try:
                future.result()
            except Exception as exc:
                raise ScanJoinError(exc) from exc
    finally:
        # On a fatal error, queued work is dropped; running tasks finish
        executor.shutdown(wait=True, cancel_futures=True)

    return hashes
