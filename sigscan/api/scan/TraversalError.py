"""Directory traversal failure."""

from pathlib import Path

from .ScanError import ScanError


class TraversalError(ScanError):
    """A directory under the scan root could not be enumerated."""

    def __init__(self, path: Path | str | None, cause: OSError):
        self.path = Path(path) if path is not None else None
        self.cause = cause
        reason = cause.strerror or str(cause)
        where = f" {self.path}" if self.path is not None else ""
        super().__init__(f"Cannot traverse{where}: {reason}")
