"""Scan API module - hashing, traversal, signature matching and remediation."""

from .RemediationError import RemediationError
from .ScanError import ScanError
from .ScanJoinError import ScanJoinError
from .TraversalError import TraversalError

__all__ = ["RemediationError", "ScanError", "ScanJoinError", "TraversalError"]
