"""Failure while waiting on a hashing task."""

from .ScanError import ScanError


class ScanJoinError(ScanError):
    """A hashing task failed unexpectedly or could not be awaited."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Error joining hashing tasks: {cause}")
