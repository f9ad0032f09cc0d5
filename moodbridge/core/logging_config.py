"""
Simple logging configuration.
"""
import logging
import logging.handlers
from enum import Enum
from pathlib import Path


class LogCategory(str, Enum):
    """Enumeration for standardized log categories."""
    APP = "moodbridge"
    PARSER = "moodbridge.parser"
    DAYONE = "moodbridge.dayone"
    IMPORTS = "moodbridge.imports"
    ERRORS = "moodbridge.errors"


DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_log_level(level_value, default=DEFAULT_LOG_LEVEL):
    """Resolve string/integer log level inputs to a logging level."""
    if isinstance(level_value, str):
        candidate = level_value.strip()
        if not candidate:
            return default, True
        if candidate.isdigit():
            level_value = int(candidate)
        else:
            candidate = candidate.upper()
            try:
                return logging._checkLevel(candidate), False
            except (ValueError, TypeError):
                return default, True
    try:
        return logging._checkLevel(level_value), False
    except (ValueError, TypeError):
        return default, True


def _get_settings():
    """Lazy import to avoid circular dependency with config module."""
    from moodbridge.core.config import settings  # local import to break circular dependency
    return settings


def setup_logging(settings=None, level_override=None):
    """Setup logging configuration.

    Args:
        settings: Settings instance, defaults to the module-level settings
        level_override: Level that wins over ``settings.log_level`` (e.g. from --verbose)
    """
    settings = settings or _get_settings()

    # Clear existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    resolved_level, used_default_level = _resolve_log_level(
        level_override if level_override is not None else settings.log_level
    )

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(resolved_level)
    root_logger.addHandler(console_handler)

    log_file = None
    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "moodbridge.log"

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(resolved_level)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(resolved_level)
    logging.getLogger(LogCategory.APP.value).setLevel(resolved_level)

    logger = logging.getLogger(__name__)
    if used_default_level:
        logger.warning(
            "Invalid log level '%s' in configuration, falling back to INFO",
            settings.log_level
        )
    logger.debug(
        "Logging configured - Level: %s",
        logging.getLevelName(resolved_level)
    )
    if log_file:
        logger.debug(f"File logging: {log_file}")

    return resolved_level


def _log_with_context(logger: logging.Logger, level: int, message: str, exc_info: bool = False, **kwargs):
    """Internal helper to format logs with extra context.

    Args:
        logger: Logger instance to use
        level: Logging level
        message: Log message
        exc_info: Whether to include exception traceback
        **kwargs: Additional context to append to message (e.g. file, line_number)
    """
    log_message = message

    if kwargs:
        extra_context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        log_message = f"{log_message} ({extra_context})"

    logger.log(level, log_message, exc_info=exc_info)


def log_info(message: str, category: LogCategory = LogCategory.APP, **kwargs):
    """Log info messages."""
    logger = logging.getLogger(category.value)
    _log_with_context(logger, logging.INFO, message, **kwargs)


def log_debug(message: str, category: LogCategory = LogCategory.APP, **kwargs):
    """Log debug messages."""
    logger = logging.getLogger(category.value)
    _log_with_context(logger, logging.DEBUG, message, **kwargs)


def log_warning(message: str, category: LogCategory = LogCategory.APP, **kwargs):
    """Log warning messages."""
    logger = logging.getLogger(category.value)
    _log_with_context(logger, logging.WARNING, message, **kwargs)


def log_error(error: Exception | str, include_traceback: bool = True, **kwargs):
    """Log errors.

    Args:
        error: Exception object or error message string
        include_traceback: Attach the traceback when ``error`` is an exception
        **kwargs: Additional context (e.g. file, returncode)
    """
    logger = logging.getLogger(LogCategory.ERRORS.value)
    message = f"Error: {str(error)}"
    # exc_info should only be True if we have an actual Exception
    exc_info = include_traceback and isinstance(error, Exception)
    _log_with_context(logger, logging.ERROR, message, exc_info=exc_info, **kwargs)
