"""
Unit tests for NoteImportService.
"""
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from moodbridge.core.config import Settings
from moodbridge.core.exceptions import DayOneCommandError, NoteValueError
from moodbridge.services.import_service import NoteImportService

NOTE_TEMPLATE = (
    "# ML 1970-01-01 00:0{minute}\n"
    "\n"
    "Date (human): 1970-01-01 01:0{minute}\n"
    "Mood: {mood}\n"
    "Date: 1970/01/01 01:0{minute} (GMT+1)\n"
    "\n"
    "{body}"
)


def write_note(directory: Path, minute: int, mood: str = "3", body: str = "Hello") -> Path:
    path = directory / f"ML 1970-01-01 00 0{minute}.md"
    path.write_text(NOTE_TEMPLATE.format(minute=minute, mood=mood, body=body), encoding="utf-8")
    return path


def make_service(**overrides):
    settings = Settings(_env_file=None, **overrides)
    dayone = MagicMock()
    return NoteImportService(settings=settings, dayone=dayone), dayone


def test_discover_notes_is_sorted_and_filtered(tmp_path):
    write_note(tmp_path, 2)
    write_note(tmp_path, 1)
    (tmp_path / "README.md").write_text("not a note", encoding="utf-8")
    (tmp_path / "ML folder.md").mkdir()

    service, _ = make_service()

    notes = service.discover_notes(tmp_path)

    assert [note.name for note in notes] == ["ML 1970-01-01 00 01.md", "ML 1970-01-01 00 02.md"]


def test_discover_notes_missing_directory(tmp_path):
    service, _ = make_service()

    with pytest.raises(ValueError):
        service.discover_notes(tmp_path / "nope")


def test_import_note_submits_mapped_request(tmp_path):
    attachment_dir = tmp_path / "ML 1970-01-01 00 00 01aaa"
    attachment_dir.mkdir()
    (attachment_dir / "Untitled.png").write_bytes(b"png")
    note = write_note(
        tmp_path,
        1,
        mood="-1",
        body="Look:\n  ![Untitled](ML%201970-01-01%2000%2000%2001aaa/Untitled.png)",
    )

    service, dayone = make_service(journal="Moods")

    request = service.import_note(note)

    dayone.create_entry.assert_called_once_with(request, source=note.name)
    assert request.content == "Look:\n[{attachment}]"
    assert request.tags == ["mood/-1", "from-notion"]
    assert request.journal == "Moods"
    assert request.attachments == [(attachment_dir / "Untitled.png").resolve()]


def test_import_note_dry_run_does_not_submit(tmp_path):
    note = write_note(tmp_path, 1)
    service, dayone = make_service(dry_run=True)

    service.import_note(note)

    dayone.create_entry.assert_not_called()


def test_import_directory_counts_entries(tmp_path):
    write_note(tmp_path, 1)
    write_note(tmp_path, 2)
    service, dayone = make_service()
    seen = []

    summary = service.import_directory(tmp_path, progress_callback=lambda path, ok: seen.append(ok))

    assert summary.notes_found == 2
    assert summary.entries_created == 2
    assert summary.notes_failed == 0
    assert summary.succeeded
    assert dayone.create_entry.call_count == 2
    assert seen == [True, True]


def test_import_directory_aborts_on_first_error_by_default(tmp_path):
    write_note(tmp_path, 1)
    write_note(tmp_path, 2, mood="9")
    write_note(tmp_path, 3)
    service, dayone = make_service()

    with pytest.raises(NoteValueError):
        service.import_directory(tmp_path)

    # The first note was already submitted, the third was never reached
    assert dayone.create_entry.call_count == 1


def test_import_directory_isolates_failures_when_asked(tmp_path):
    write_note(tmp_path, 1)
    bad = write_note(tmp_path, 2, mood="9")
    write_note(tmp_path, 3)
    service, dayone = make_service()

    summary = service.import_directory(tmp_path, stop_on_error=False)

    assert summary.entries_created == 2
    assert summary.notes_failed == 1
    assert not summary.succeeded
    failure = summary.failures[0]
    assert failure.file == bad
    assert failure.error_type == "NoteValueError"
    assert failure.line_number == 4
    assert dayone.create_entry.call_count == 2


def test_import_directory_isolates_dayone_failures(tmp_path):
    write_note(tmp_path, 1)
    write_note(tmp_path, 2)
    service, dayone = make_service(stop_on_error=False)
    dayone.create_entry.side_effect = [DayOneCommandError("boom", returncode=1), "ok"]

    summary = service.import_directory(tmp_path)

    assert summary.entries_created == 1
    assert summary.failures[0].error_type == "DayOneCommandError"
    assert summary.failures[0].line_number is None


def test_import_directory_dry_run_counts_attachments(tmp_path):
    (tmp_path / "img").mkdir()
    (tmp_path / "img" / "a.png").write_bytes(b"a")
    (tmp_path / "img" / "b.png").write_bytes(b"b")
    write_note(tmp_path, 1, body="![a](img/a.png)\n![b](img/b.png)")
    service, dayone = make_service()

    summary = service.import_directory(tmp_path, dry_run=True)

    assert summary.dry_run is True
    assert summary.entries_created == 1
    assert summary.attachments_imported == 2
    dayone.create_entry.assert_not_called()
