"""
Main CLI application using Typer.

Entry point: python -m moodbridge.cli
CLI Name: moodbridge
"""
import typer

from moodbridge import __version__ as app_version

app = typer.Typer(
    name="moodbridge",
    help="moodbridge - import Notion mood-log exports into Day One",
)

@app.command()
def version():
    """Show CLI version information."""
    typer.echo(f"moodbridge version {app_version}")

# Register command groups
from moodbridge.cli.commands import import_cmd
app.add_typer(import_cmd.app, name="import")
