"""
Notion mood-log data models.

A mood log is exported by Notion as one Markdown file per entry:

```
# ML 1970-01-01 00:01

Date (human): 1970-01-01 01:01
Mood: 2
Date: 1970/01/01 01:01 (GMT+1)

Free-form body, possibly with ![images](relative%20path.png)
```
"""
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from moodbridge.core.time_utils import ensure_utc

ATTACHMENT_PLACEHOLDER = "[{attachment}]"


class Mood(str, Enum):
    """Mood rating, keyed by the code Notion writes on the ``Mood:`` line."""
    UNRATED = "-1"
    LEVEL_1 = "1"
    LEVEL_2 = "2"
    LEVEL_3 = "3"
    LEVEL_4 = "4"
    LEVEL_5 = "5"

    @property
    def code(self) -> str:
        return self.value


MOOD_CODES = {
    "-1": Mood.UNRATED,
    "1": Mood.LEVEL_1,
    "2": Mood.LEVEL_2,
    "3": Mood.LEVEL_3,
    "4": Mood.LEVEL_4,
    "5": Mood.LEVEL_5,
}


class MoodRecord(BaseModel):
    """
    One parsed mood-log note.

    ``body`` holds one ``[{attachment}]`` placeholder per entry of
    ``attachments``, in the same order.
    """
    timestamp: datetime = Field(..., description="Absolute entry time, UTC")
    mood: Mood
    body: str = Field(..., description="Body with attachment lines replaced by placeholders")
    attachments: Tuple[Path, ...] = Field(default_factory=tuple, description="Relative attachment paths")

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, v: datetime) -> datetime:
        """Only absolute instants are accepted; store them in UTC."""
        if v.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware")
        return ensure_utc(v)

    @property
    def placeholder_count(self) -> int:
        return self.body.count(ATTACHMENT_PLACEHOLDER)

    class Config:
        frozen = True
