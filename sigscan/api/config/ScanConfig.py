"""Scan engine configuration."""

import os

from pydantic import BaseModel, ConfigDict, Field

from ...constants import HASH_CHUNK_SIZE


def _default_max_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


class ScanConfig(BaseModel):
    """Settings for traversal and hashing."""

    model_config = ConfigDict(extra="forbid")

    max_workers: int = Field(default_factory=_default_max_workers, gt=0, description="Hashing worker threads")
    chunk_size: int = Field(HASH_CHUNK_SIZE, gt=0, description="Bytes read per chunk while hashing")
    follow_symlinks: bool = Field(True, description="Descend into symlinked directories")
    detect_cycles: bool = Field(True, description="Skip directories already visited through a symlink")
