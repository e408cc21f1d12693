"""Output schemas for sigscan commands."""

from ._base import BaseOutputSchema
from .scan import MatchEntry, RemoveOutput, ScanOutput, SignaturesOutput

__all__ = ["BaseOutputSchema", "MatchEntry", "RemoveOutput", "ScanOutput", "SignaturesOutput"]
