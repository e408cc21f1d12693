"""Terminal result of one scan."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .ScanError import ScanError


@dataclass(frozen=True)
class ScanOutcome:
    """Either the signature matches of a scan or the error that ended it.

    ``matches`` maps digest to path and is read-only. It is None when
    ``error`` is set.
    """

    matches: Mapping[str, Path] | None = None
    error: ScanError | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if (self.matches is None) == (self.error is None):
            raise ValueError("ScanOutcome needs exactly one of matches or error")

    @classmethod
    def ok(cls, matches: Mapping[str, Path]) -> "ScanOutcome":
        return cls(matches=MappingProxyType(dict(matches)))

    @classmethod
    def failed(cls, error: ScanError) -> "ScanOutcome":
        return cls(error=error)

    @property
    def is_clean(self) -> bool:
        """True only for a successful scan without matches."""
        return self.matches is not None and not self.matches
