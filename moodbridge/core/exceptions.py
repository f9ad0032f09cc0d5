"""
Custom application exceptions.
"""
from typing import Optional


class MoodBridgeException(Exception):
    """Base exception for the importer."""
    pass


class NoteParseError(MoodBridgeException):
    """
    Raised when a Notion mood note does not match the expected layout.

    Carries the 1-based line number and the field that failed so callers can
    report exactly where a document went wrong.
    """

    def __init__(self, message: str, line_number: Optional[int] = None, field: Optional[str] = None):
        self.line_number = line_number
        self.field = field
        location = f"line {line_number}" if line_number is not None else "document"
        if field:
            location = f"{location} ({field})"
        super().__init__(f"{location}: {message}")
        self.message = message


class NoteFormatError(NoteParseError):
    """Raised when the fixed note header is missing or malformed."""
    pass


class NoteValueError(NoteParseError, ValueError):
    """Raised when a header value does not match its grammar."""
    pass


class AttachmentReferenceError(NoteParseError):
    """Raised when an attachment line has no usable (...) reference."""
    pass


class AttachmentNotFoundError(MoodBridgeException):
    """Raised when a referenced attachment file does not exist."""

    def __init__(self, path, reason: str = "not found"):
        super().__init__(f"Attachment {reason}: {path}")
        self.path = path
        self.reason = reason


class DayOneCommandError(MoodBridgeException):
    """Raised when the Day One command line tool fails."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: Optional[str] = None):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
