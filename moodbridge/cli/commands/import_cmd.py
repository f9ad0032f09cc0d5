"""
Import commands for Notion mood-log exports.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, BarColumn, TextColumn, TimeRemainingColumn
from rich.table import Table

from moodbridge.cli.logging import setup_cli_logging
from moodbridge.core.config import get_settings
from moodbridge.core.exceptions import MoodBridgeException, NoteParseError
from moodbridge.core.time_utils import serialize_datetime
from moodbridge.data_transfer.notion import NotionMoodParser
from moodbridge.services.import_service import NoteImportService

app = typer.Typer(help="Import Notion mood logs into Day One")
console = Console()


@app.command("notes")
def import_notes(
    export_dir: Optional[Path] = typer.Argument(None, help="Directory with the exported 'ML *.md' notes"),
    journal: Optional[str] = typer.Option(None, "--journal", "-j", help="Day One journal to import into"),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Glob for note files"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Parse and map notes without creating entries"),
    continue_on_error: bool = typer.Option(False, "--continue-on-error", help="Skip failing notes instead of aborting"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """
    Create one Day One entry per exported mood-log note.

    By default the first note that fails to parse or submit aborts the run.
    """
    base_settings = get_settings()
    logger = setup_cli_logging("import", verbose=verbose, settings=base_settings)

    updates = {}
    if export_dir is not None:
        updates["export_dir"] = export_dir
    if journal is not None:
        updates["journal"] = journal or None
    if pattern is not None:
        updates["note_glob"] = pattern
    if dry_run:
        updates["dry_run"] = True
    if continue_on_error:
        updates["stop_on_error"] = False
    settings = base_settings.model_copy(update=updates)

    logger.info(
        f"Options: export_dir={settings.export_dir}, pattern={settings.note_glob}, "
        f"journal={settings.journal}, dry_run={settings.dry_run}, stop_on_error={settings.stop_on_error}"
    )

    service = NoteImportService(settings=settings)

    try:
        total = len(service.discover_notes(settings.export_dir))
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    if total == 0:
        console.print(f"[yellow]No notes matching '{settings.note_glob}' in {settings.export_dir}[/yellow]")
        raise typer.Exit(code=0)

    header = Table(title="Notion → Day One Import")
    header.add_column("Metric", style="cyan")
    header.add_column("Value", style="white")
    header.add_row("Notes found", str(total))
    header.add_row("Journal", settings.journal or "(Day One default)")
    header.add_row("Mode", "DRY RUN" if settings.dry_run else "LIVE")
    header.add_row("On error", "abort" if settings.stop_on_error else "skip note")
    console.print(header)

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.percentage:>3.0f}%"),
        TimeRemainingColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Importing notes...", total=total)

        def on_note(note_path: Path, succeeded: bool) -> None:
            progress.advance(task)
            if not succeeded:
                progress.console.print(f"[yellow]⚠ Skipped {note_path.name}[/yellow]")

        try:
            summary = service.import_directory(progress_callback=on_note)
        except (MoodBridgeException, OSError, ValueError) as e:
            progress.stop()
            console.print(f"\n[red]✗ Import aborted: {e}[/red]")
            raise typer.Exit(code=1)

    table = Table(title="Import Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Notes found", str(summary.notes_found))
    table.add_row("Entries created" if not summary.dry_run else "Entries planned", str(summary.entries_created))
    table.add_row("Attachments", str(summary.attachments_imported))
    table.add_row("Failed", str(summary.notes_failed))
    console.print(table)

    if summary.failures:
        failures = Table(title="Failed Notes")
        failures.add_column("File", style="white")
        failures.add_column("Error", style="red")
        for failure in summary.failures:
            failures.add_row(failure.file.name, f"{failure.error_type}: {failure.message}")
        console.print(failures)
        raise typer.Exit(code=1)

    console.print("\n[green]✓ Import complete[/green]")


@app.command("parse")
def parse_note(
    note: Path = typer.Argument(..., exists=True, dir_okay=False, help="Exported note to inspect"),
):
    """Parse a single note and print the resulting record without importing it."""
    try:
        record = NotionMoodParser.parse(note.read_text(encoding="utf-8"))
    except NoteParseError as e:
        console.print(f"[red]✗ {note.name}: {e}[/red]")
        raise typer.Exit(code=1)
    except UnicodeDecodeError as e:
        console.print(f"[red]✗ {note.name}: not valid UTF-8 ({e.reason} at byte {e.start})[/red]")
        raise typer.Exit(code=1)

    table = Table(title=note.name)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Timestamp", serialize_datetime(record.timestamp))
    table.add_row("Mood", f"{record.mood.name} ({record.mood.code})")
    table.add_row("Attachments", "\n".join(str(path) for path in record.attachments) or "-")
    console.print(table)
    console.print(record.body, markup=False, highlight=False)
