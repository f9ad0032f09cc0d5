"""
Import service for moving Notion mood logs into Day One.

Handles note discovery, parsing, mapping and submission.
"""
from pathlib import Path
from typing import Callable, List, Optional

from moodbridge.core.config import Settings, settings as default_settings
from moodbridge.core.exceptions import MoodBridgeException, NoteParseError
from moodbridge.core.logging_config import LogCategory, log_error, log_info, log_warning
from moodbridge.data_transfer.dayone import DayOneCLI, DayOneEntryRequest, NotionToDayOneMapper
from moodbridge.data_transfer.notion import MoodRecord, NotionMoodParser
from moodbridge.schemas.dto import ImportResultSummary, NoteFailure


class NoteImportService:
    """Service for importing Notion mood-log notes."""

    def __init__(self, settings: Optional[Settings] = None, dayone: Optional[DayOneCLI] = None):
        """
        Initialize import service.

        Args:
            settings: Settings to use, defaults to the module-level settings
            dayone: Day One client, built from settings when omitted
        """
        self.settings = settings or default_settings
        self.dayone = dayone or DayOneCLI(
            binary=self.settings.dayone_binary,
            timeout=self.settings.dayone_timeout_seconds,
        )

    def discover_notes(self, export_dir: Path, pattern: Optional[str] = None) -> List[Path]:
        """
        List exported notes in ``export_dir``, sorted by name.

        Raises:
            ValueError: If the directory does not exist
        """
        if not export_dir.is_dir():
            raise ValueError(f"Export directory not found: {export_dir}")

        pattern = pattern or self.settings.note_glob
        notes = sorted(path for path in export_dir.glob(pattern) if path.is_file())
        log_info(
            f"Found {len(notes)} notes",
            category=LogCategory.IMPORTS,
            export_dir=str(export_dir),
            pattern=pattern,
        )
        return notes

    @staticmethod
    def read_note(note_path: Path) -> MoodRecord:
        """Read and parse a single note."""
        content = note_path.read_text(encoding="utf-8")
        return NotionMoodParser.parse(content)

    def build_request(self, note_path: Path) -> DayOneEntryRequest:
        """Parse a note and map it to a Day One entry request."""
        record = self.read_note(note_path)
        return NotionToDayOneMapper.map_record(
            record,
            note_path.parent,
            journal=self.settings.journal,
            marker_tag=self.settings.marker_tag,
            starred=self.settings.starred,
        )

    def import_note(self, note_path: Path, dry_run: Optional[bool] = None) -> DayOneEntryRequest:
        """
        Import one note.

        Args:
            note_path: Note to import
            dry_run: Skip the Day One call, defaults to ``settings.dry_run``

        Returns:
            The request that was (or, in dry-run, would have been) submitted
        """
        dry_run = self.settings.dry_run if dry_run is None else dry_run
        request = self.build_request(note_path)

        if dry_run:
            log_info(
                f"Dry run, not submitting {note_path.name}",
                category=LogCategory.IMPORTS,
                attachments=len(request.attachments),
            )
            return request

        self.dayone.create_entry(request, source=note_path.name)
        return request

    def import_directory(
        self,
        export_dir: Optional[Path] = None,
        *,
        pattern: Optional[str] = None,
        dry_run: Optional[bool] = None,
        stop_on_error: Optional[bool] = None,
        progress_callback: Optional[Callable[[Path, bool], None]] = None,
    ) -> ImportResultSummary:
        """
        Import every note in an export directory, one after the other.

        With ``stop_on_error`` the first failing note aborts the run and its
        exception propagates; notes imported before it stay in Day One.
        Otherwise failures are logged, recorded in the summary and the run
        continues with the next note.

        Args:
            export_dir: Directory holding the notes, defaults to ``settings.export_dir``
            pattern: Glob for note files, defaults to ``settings.note_glob``
            dry_run: Skip the Day One calls
            stop_on_error: Abort on the first failure
            progress_callback: Called with (note_path, succeeded) after each note

        Returns:
            ImportResultSummary
        """
        export_dir = export_dir or self.settings.export_dir
        dry_run = self.settings.dry_run if dry_run is None else dry_run
        stop_on_error = self.settings.stop_on_error if stop_on_error is None else stop_on_error

        notes = self.discover_notes(export_dir, pattern)
        summary = ImportResultSummary(notes_found=len(notes), dry_run=dry_run)

        for note_path in notes:
            try:
                request = self.import_note(note_path, dry_run=dry_run)
            except (MoodBridgeException, OSError, UnicodeDecodeError) as e:
                if stop_on_error:
                    log_error(e, file=str(note_path))
                    raise
                log_warning(
                    f"Skipping {note_path.name}: {e}",
                    category=LogCategory.IMPORTS,
                    error_type=type(e).__name__,
                )
                summary.notes_failed += 1
                summary.failures.append(
                    NoteFailure(
                        file=note_path,
                        error_type=type(e).__name__,
                        message=str(e),
                        line_number=e.line_number if isinstance(e, NoteParseError) else None,
                    )
                )
                if progress_callback:
                    progress_callback(note_path, False)
                continue

            summary.entries_created += 1
            summary.attachments_imported += len(request.attachments)
            log_info(f"Processed {note_path.name}", category=LogCategory.IMPORTS)
            if progress_callback:
                progress_callback(note_path, True)

        log_info(
            "Import finished",
            category=LogCategory.IMPORTS,
            entries_created=summary.entries_created,
            notes_failed=summary.notes_failed,
            dry_run=dry_run,
        )
        return summary
