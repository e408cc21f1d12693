"""Output schemas for scan commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema


class MatchEntry(BaseModel):
    """A file whose digest is a known signature."""
    digest: str = Field(..., description="Lowercase hex SHA-1 of the file content")
    path: str = Field(..., description="Absolute path of the matching file")


class ScanOutput(BaseOutputSchema):
    """Output schema for scan command."""
    root: str = Field(..., description="Directory that was scanned")
    discovered: int = Field(..., description="Regular files found during traversal")
    completed: int = Field(..., description="Files hashed successfully")
    matches: list[MatchEntry] = Field(..., description="Files matching a known signature")
    removed: list[str] = Field(default_factory=list, description="Matching files deleted by --remove")
    clean: bool | None = Field(..., description="True if no match was found, None if the scan failed")
    success: bool = Field(..., description="Whether scan completed without fatal error or remaining matches")


class RemoveOutput(BaseOutputSchema):
    """Output schema for remove command."""
    requested: list[str] = Field(..., description="Paths requested for removal")
    removed: list[str] = Field(..., description="Paths actually deleted")
    success: bool = Field(..., description="Whether every deletion succeeded")


class SignaturesOutput(BaseOutputSchema):
    """Output schema for signatures command."""
    signatures: list[str] = Field(..., description="Known-malicious SHA-1 digests")
    count: int = Field(..., description="Number of distinct signatures")
