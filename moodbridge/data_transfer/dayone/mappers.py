"""
Notion to Day One mappers.

Converts parsed Notion mood logs into Day One entry requests.
"""
from pathlib import Path
from typing import List, Optional

from moodbridge.core.config import DEFAULT_JOURNAL, DEFAULT_MARKER_TAG
from moodbridge.core.exceptions import AttachmentNotFoundError
from moodbridge.data_transfer.notion.models import Mood, MoodRecord
from .models import DayOneEntryRequest


class NotionToDayOneMapper:
    """
    Maps Notion mood logs to Day One entries.

    Handles:
    - Mood to tag conversion (``mood/<code>``)
    - Attachment path resolution
    - Journal, starred flag and marker tag from configuration
    """

    @staticmethod
    def mood_tag(mood: Mood) -> str:
        """Tag that records the mood rating on the Day One side."""
        return f"mood/{mood.code}"

    @staticmethod
    def build_tags(mood: Mood, marker_tag: Optional[str] = DEFAULT_MARKER_TAG) -> List[str]:
        tags = [NotionToDayOneMapper.mood_tag(mood)]
        if marker_tag:
            tags.append(marker_tag)
        return tags

    @staticmethod
    def resolve_attachment(relative_path: Path, base_dir: Path) -> Path:
        """
        Resolve an attachment reference relative to the note's directory.

        Raises:
            AttachmentNotFoundError: If the path does not exist or is not a file
        """
        candidate = base_dir / relative_path
        try:
            resolved = candidate.resolve(strict=True)
        except (FileNotFoundError, NotADirectoryError):
            raise AttachmentNotFoundError(candidate) from None

        if not resolved.is_file():
            raise AttachmentNotFoundError(candidate, reason="is not a file")
        return resolved

    @staticmethod
    def map_record(
        record: MoodRecord,
        base_dir: Path,
        *,
        journal: Optional[str] = DEFAULT_JOURNAL,
        marker_tag: Optional[str] = DEFAULT_MARKER_TAG,
        starred: bool = False,
    ) -> DayOneEntryRequest:
        """
        Map a parsed note to a Day One entry request.

        Args:
            record: Parsed mood log
            base_dir: Directory the note was read from; attachments are relative to it
            journal: Target Day One journal
            marker_tag: Extra tag marking imported entries
            starred: Star the entry

        Returns:
            DayOneEntryRequest
        """
        attachments = [
            NotionToDayOneMapper.resolve_attachment(path, base_dir)
            for path in record.attachments
        ]

        return DayOneEntryRequest(
            content=record.body,
            attachments=attachments,
            tags=NotionToDayOneMapper.build_tags(record.mood, marker_tag),
            journal=journal,
            timestamp=record.timestamp,
            starred=starred,
        )
