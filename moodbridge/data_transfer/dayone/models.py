"""
Day One entry request model.

Everything the ``dayone2 new`` command needs to create one entry.
"""
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from moodbridge.core.time_utils import ensure_utc


class DayOneEntryRequest(BaseModel):
    """
    A single Day One entry, ready to be submitted.
    """
    content: str = Field(..., description="Entry text, Markdown")
    attachments: List[Path] = Field(default_factory=list, description="Absolute attachment paths")
    tags: List[str] = Field(default_factory=list)
    journal: Optional[str] = Field(None, description="Target journal, Day One default when None")
    timestamp: Optional[datetime] = Field(None, description="Entry date, Day One uses 'now' when None")
    starred: bool = False

    @field_validator("attachments")
    @classmethod
    def validate_attachments(cls, v: List[Path]) -> List[Path]:
        """Attachment paths are handed to an external program and must be absolute."""
        for path in v:
            if not path.is_absolute():
                raise ValueError(f"Attachment path must be absolute: {path}")
        return v

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return None
        if v.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware")
        return ensure_utc(v)

    class Config:
        frozen = True
