"""
Notion mood-log import module.

Handles parsing Notion Markdown exports of the mood-log database.
"""
from .notion_parser import NotionMoodParser
from .models import ATTACHMENT_PLACEHOLDER, Mood, MoodRecord

__all__ = [
    "NotionMoodParser",
    "ATTACHMENT_PLACEHOLDER",
    "Mood",
    "MoodRecord",
]
