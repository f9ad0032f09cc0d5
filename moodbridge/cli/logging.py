"""
Logging setup for CLI commands.
"""
import logging
from typing import Optional

from moodbridge.core.config import Settings, settings as default_settings
from moodbridge.core.logging_config import setup_logging


def setup_cli_logging(command: str, verbose: bool = False, settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure logging for a CLI command and return its logger.

    ``--verbose`` forces DEBUG regardless of the configured level.
    """
    setup_logging(settings or default_settings, level_override="DEBUG" if verbose else None)
    return logging.getLogger(f"moodbridge.cli.{command}")
