"""
Application configuration using pydantic-settings.
"""
import logging
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_NOTE_GLOB = "ML *.md"
DEFAULT_JOURNAL = "Journal"
DEFAULT_MARKER_TAG = "from-notion"


class Settings(BaseSettings):
    """Application settings."""

    # Source export
    export_dir: Path = Path(".")
    note_glob: str = DEFAULT_NOTE_GLOB

    # Day One target
    journal: Optional[str] = DEFAULT_JOURNAL
    marker_tag: str = DEFAULT_MARKER_TAG
    starred: bool = False
    dayone_binary: str = "dayone2"
    dayone_timeout_seconds: int = 120

    # Batch behaviour
    stop_on_error: bool = True  # Abort the whole batch on the first failing note
    dry_run: bool = False

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None  # Console only when unset

    model_config = SettingsConfigDict(
        env_prefix="MOODBRIDGE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("note_glob", "dayone_binary")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty glob patterns and binary names."""
        if not v or not v.strip():
            raise ValueError("Value must not be empty")
        return v.strip()

    @field_validator("journal", mode="before")
    @classmethod
    def normalize_journal(cls, v):
        """Treat an empty journal name as "use Day One's default journal"."""
        if v is None:
            return None
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("dayone_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("DAYONE_TIMEOUT_SECONDS must be a positive integer")
        return v

    @field_validator("marker_tag")
    @classmethod
    def validate_marker_tag(cls, v: str) -> str:
        v = v.strip()
        if not v:
            logger.warning("MARKER_TAG is empty, imported entries will only carry the mood tag")
        return v


# Create settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get settings instance."""
    return settings
