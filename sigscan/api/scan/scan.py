"""Scan a directory tree for files matching known signatures."""

import logging
from pathlib import Path

from ..config.ScanConfig import ScanConfig
from . import signatures
from .compute_file_hashes import compute_file_hashes
from .ProgressState import ProgressState
from .ScanError import ScanError
from .ScanOutcome import ScanOutcome

logger = logging.getLogger(__name__)


def scan(
    root: Path,
    progress: ProgressState | None = None,
    config: ScanConfig | None = None,
) -> ScanOutcome:
    """Hash every file under ``root`` and keep those matching a signature.

    Scan failures are returned in the outcome, never raised.

    Args:
        root: Directory to scan
        progress: Counters to update; reset before the scan starts
        config: Engine settings, defaults when omitted
    """
    if progress is None:
        progress = ProgressState()
    if config is None:
        config = ScanConfig()

    progress.reset()
    root = Path(root).absolute()
    logger.info(f"Scanning {root} with {config.max_workers} worker(s)")

    try:
        hashes = compute_file_hashes(
            root,
            progress,
            max_workers=config.max_workers,
            chunk_size=config.chunk_size,
            follow_symlinks=config.follow_symlinks,
            detect_cycles=config.detect_cycles,
        )
    except ScanError as exc:
        logger.error(f"Scan of {root} failed: {exc}")
        return ScanOutcome.failed(exc)

    matches = {digest: path for digest, path in hashes.items() if signatures.is_infected_hash(digest)}

    discovered, completed = progress.snapshot()
    logger.info(f"Scan of {root} finished: {completed}/{discovered} file(s) hashed, {len(matches)} match(es)")
    for digest, path in matches.items():
        logger.warning(f"Signature match {digest}: {path}")

    return ScanOutcome.ok(matches)
