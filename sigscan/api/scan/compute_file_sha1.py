"""Streaming SHA-1 digest of a file."""

import hashlib
from pathlib import Path

from ...constants import HASH_CHUNK_SIZE


def compute_file_sha1(path: Path, chunk_size: int = HASH_CHUNK_SIZE) -> str:
    """Calculate the SHA-1 of a file, reading it in ``chunk_size`` pieces.

    Raises:
        OSError: If the file cannot be opened or a read fails
    """
    hasher = hashlib.sha1()
    with Path(path).open("rb") as fh:
        for chunk in iter(lambda: fh.read(chunk_size), b""):
            hasher.update(chunk)
    return hasher.hexdigest()
