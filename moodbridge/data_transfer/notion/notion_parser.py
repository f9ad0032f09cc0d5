"""
Notion mood-log parser.

Turns the text of one exported mood-log note into a MoodRecord.
"""
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from urllib.parse import unquote

from moodbridge.core.exceptions import AttachmentReferenceError, NoteFormatError, NoteValueError
from moodbridge.core.time_utils import assume_source_offset
from .models import ATTACHMENT_PLACEHOLDER, MOOD_CODES, Mood, MoodRecord

DATE_PREFIX = "Date (human): "
MOOD_PREFIX = "Mood: "
ATTACHMENT_MARKER = "!["

HEADER_LINES = 6
DATE_LINE = 3
MOOD_LINE = 4

DATETIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$", re.ASCII)
DATETIME_FORMAT = "%Y-%m-%d %H:%M"


def split_lines(content: str) -> List[str]:
    r"""
    Split on "\n" only, dropping one trailing "\r" per line.

    Other line-break characters (form feed, lone "\r", U+2028, ...) stay
    inside their line.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class NotionMoodParser:
    """
    Parser for Notion mood-log exports.

    Layout, by line:
    1. title (ignored)
    2. blank
    3. ``Date (human): YYYY-MM-DD HH:MM``
    4. ``Mood: <code>``
    5. ``Date: ...`` (ignored, its GMT annotation is not used)
    6. blank
    7+. body

    Any deviation raises a NoteParseError subclass; no partial record is
    ever returned.
    """

    @staticmethod
    def parse_datetime(line: str, line_number: int = DATE_LINE) -> datetime:
        """
        Parse the ``Date (human): 1970-01-01 01:01`` line.

        The wall-clock time is read at the export's fixed +01:00 offset.

        Raises:
            NoteFormatError: If the prefix is missing
            NoteValueError: If the value is not a valid ``YYYY-MM-DD HH:MM``
        """
        if not line.startswith(DATE_PREFIX):
            raise NoteFormatError(
                f"expected line starting with {DATE_PREFIX!r}, got {line!r}",
                line_number=line_number,
                field="date",
            )

        value = line[len(DATE_PREFIX):]
        if not DATETIME_PATTERN.match(value):
            raise NoteValueError(
                f"date {value!r} does not match YYYY-MM-DD HH:MM",
                line_number=line_number,
                field="date",
            )

        try:
            wall_clock = datetime.strptime(value, DATETIME_FORMAT)
        except ValueError as e:
            raise NoteValueError(
                f"invalid date {value!r}: {e}",
                line_number=line_number,
                field="date",
            ) from e

        return assume_source_offset(wall_clock)

    @staticmethod
    def parse_mood(line: str, line_number: int = MOOD_LINE) -> Mood:
        """
        Parse the ``Mood: <code>`` line.

        Raises:
            NoteFormatError: If the prefix is missing
            NoteValueError: If the code is not one of -1, 1..5
        """
        if not line.startswith(MOOD_PREFIX):
            raise NoteFormatError(
                f"expected line starting with {MOOD_PREFIX!r}, got {line!r}",
                line_number=line_number,
                field="mood",
            )

        code = line[len(MOOD_PREFIX):]
        try:
            return MOOD_CODES[code]
        except KeyError:
            raise NoteValueError(
                f"unknown mood code {code!r}",
                line_number=line_number,
                field="mood",
            ) from None

    @staticmethod
    def parse_attachment(line: str, line_number: Optional[int] = None) -> Path:
        """
        Extract the decoded path from a line like
        ``![Untitled](ML%201970-01-01%2000%2000%2001.../Untitled.png)``.

        Raises:
            AttachmentReferenceError: If there is no ``(...)`` span or the
                span is not valid percent-encoded UTF-8
        """
        start = line.find("(")
        end = line.find(")")
        if start == -1 or end == -1 or end < start:
            raise AttachmentReferenceError(
                f"no (...) reference in {line!r}",
                line_number=line_number,
                field="attachment",
            )

        encoded = line[start + 1:end]
        try:
            decoded = unquote(encoded, errors="strict")
        except UnicodeDecodeError as e:
            raise AttachmentReferenceError(
                f"reference {encoded!r} is not valid percent-encoded UTF-8",
                line_number=line_number,
                field="attachment",
            ) from e

        if not decoded:
            raise AttachmentReferenceError(
                f"empty reference in {line!r}",
                line_number=line_number,
                field="attachment",
            )

        return Path(decoded)

    @staticmethod
    def parse(content: str) -> MoodRecord:
        """
        Parse one exported note.

        Args:
            content: Full text of the note

        Returns:
            MoodRecord

        Raises:
            NoteFormatError, NoteValueError, AttachmentReferenceError
        """
        lines = split_lines(content)
        if len(lines) < HEADER_LINES:
            raise NoteFormatError(
                f"expected at least {HEADER_LINES} header lines, got {len(lines)}",
                field="header",
            )

        timestamp = NotionMoodParser.parse_datetime(lines[DATE_LINE - 1])
        mood = NotionMoodParser.parse_mood(lines[MOOD_LINE - 1])

        body_lines = lines[HEADER_LINES:]
        if not body_lines:
            raise NoteFormatError(
                "note has no body",
                line_number=HEADER_LINES + 1,
                field="body",
            )

        rewritten: List[str] = []
        attachments: List[Path] = []
        for line_number, line in enumerate(body_lines, start=HEADER_LINES + 1):
            stripped = line.strip()
            if stripped.startswith(ATTACHMENT_MARKER):
                attachments.append(NotionMoodParser.parse_attachment(stripped, line_number))
                rewritten.append(ATTACHMENT_PLACEHOLDER)
            else:
                rewritten.append(line)

        return MoodRecord(
            timestamp=timestamp,
            mood=mood,
            body="\n".join(rewritten),
            attachments=tuple(attachments),
        )
