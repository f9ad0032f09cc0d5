"""
Data Transfer Objects (DTOs) for import runs.
"""
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class NoteFailure(BaseModel):
    """A note that could not be imported."""
    file: Path = Field(..., description="Note that failed")
    error_type: str = Field(..., description="Exception class name")
    message: str = Field(..., description="Error message")
    line_number: Optional[int] = Field(None, description="Offending line, for parse errors")


class ImportResultSummary(BaseModel):
    """
    Summary of an import run.
    """
    notes_found: int = Field(0, description="Notes matching the glob pattern")
    entries_created: int = Field(0, description="Day One entries created (or planned, in dry-run)")
    attachments_imported: int = Field(0, description="Attachments submitted with the entries")
    notes_failed: int = Field(0, description="Notes skipped because of an error")
    dry_run: bool = Field(False, description="No entry was submitted to Day One")

    failures: List[NoteFailure] = Field(
        default_factory=list,
        description="Per-note failures, only populated when errors are isolated"
    )

    @property
    def succeeded(self) -> bool:
        return self.notes_failed == 0
