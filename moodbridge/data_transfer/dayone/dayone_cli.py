"""
Day One command line client.

Creates entries through the ``dayone2`` CLI shipped with Day One for macOS.
"""
import subprocess
from datetime import datetime
from typing import List, Optional

from moodbridge.core.exceptions import DayOneCommandError
from moodbridge.core.logging_config import LogCategory, log_debug, log_info
from moodbridge.core.time_utils import serialize_datetime
from .models import DayOneEntryRequest

DEFAULT_BINARY = "dayone2"
DEFAULT_TIMEOUT_SECONDS = 120


def format_iso_date(dt: datetime) -> str:
    """Format an aware datetime the way ``--isoDate`` expects it."""
    return serialize_datetime(dt)


class DayOneCLI:
    """
    Thin wrapper around ``dayone2 new``.

    Options go before ``--`` and the entry text is passed as the last
    positional argument, so content that starts with a dash is safe.
    """

    def __init__(self, binary: str = DEFAULT_BINARY, timeout: int = DEFAULT_TIMEOUT_SECONDS):
        self.binary = binary
        self.timeout = timeout

    @staticmethod
    def build_args(request: DayOneEntryRequest) -> List[str]:
        """
        Build the argument list (without the binary) for one entry.

        Args:
            request: Entry to create

        Returns:
            Arguments in the order ``dayone2`` expects them
        """
        args: List[str] = []
        if request.attachments:
            args.append("--attachments")
            args.extend(str(path) for path in request.attachments)
        if request.tags:
            args.append("--tags")
            args.extend(request.tags)
        if request.journal is not None:
            args.extend(["--journal", request.journal])
        if request.timestamp is not None:
            args.extend(["--isoDate", format_iso_date(request.timestamp)])
        if request.starred:
            args.append("--starred")
        if args:
            args.append("--")
        args.extend(["new", request.content])
        return args

    def build_command(self, request: DayOneEntryRequest) -> List[str]:
        return [self.binary, *self.build_args(request)]

    def create_entry(self, request: DayOneEntryRequest, source: Optional[str] = None) -> str:
        """
        Create one Day One entry.

        Args:
            request: Entry to create
            source: Name of the note the entry came from, for logging

        Returns:
            Standard output of ``dayone2`` (it prints the new entry's UUID)

        Raises:
            DayOneCommandError: If the binary is missing, times out or exits non-zero
        """
        cmd = self.build_command(request)
        log_debug(
            "Running Day One CLI",
            category=LogCategory.DAYONE,
            binary=self.binary,
            attachments=len(request.attachments),
            source=source,
        )

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except FileNotFoundError as e:
            raise DayOneCommandError(
                f"Day One CLI not found: {self.binary}. Install it from Day One > Settings > Advanced."
            ) from e
        except subprocess.TimeoutExpired as e:
            raise DayOneCommandError(
                f"Day One CLI timed out after {self.timeout}s"
            ) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise DayOneCommandError(
                f"Day One CLI exited with status {result.returncode}: {stderr or 'no output'}",
                returncode=result.returncode,
                stderr=stderr,
            )

        output = (result.stdout or "").strip()
        log_info("Created Day One entry", category=LogCategory.DAYONE, source=source, output=output)
        return output
