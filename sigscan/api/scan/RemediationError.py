"""Deletion failure during remediation."""

from pathlib import Path

from .ScanError import ScanError


class RemediationError(ScanError):
    """A matched file could not be deleted.

    Files removed before the failure stay removed and are listed in ``removed``.
    """

    def __init__(self, path: Path, cause: OSError, removed: list[Path]):
        self.path = path
        self.cause = cause
        self.removed = list(removed)
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to remove {path}: {reason} ({len(self.removed)} file(s) removed before the failure)")
