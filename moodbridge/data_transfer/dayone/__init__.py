"""
Day One export module.

Maps parsed notes to Day One entries and submits them via the dayone2 CLI.
"""
from .dayone_cli import DayOneCLI
from .models import DayOneEntryRequest
from .mappers import NotionToDayOneMapper

__all__ = [
    "DayOneCLI",
    "DayOneEntryRequest",
    "NotionToDayOneMapper",
]
