"""Structured logging using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Context binding support
- Dual output (stderr + optional file logging)

Configuration is loaded from sql_dump_extractor.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- DUMPX_LOG_TO_FILE: Enable file logging. Default: disabled
- DUMPX_LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from sql_dump_extractor.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("extractor.table_extracted", table="users", rows=2)
"""

import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.types import Processor

from sql_dump_extractor.config import get_settings


def _get_log_level() -> int:
    """Get log level from settings.

    Falls back to the LOG_LEVEL environment variable when settings cannot be
    loaded (for example an invalid DUMPX_ value in the environment).
    """
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    try:
        return get_settings().log_to_file
    except Exception:
        return os.getenv("DUMPX_LOG_TO_FILE", "").lower() in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    try:
        log_dir = Path(get_settings().log_file_dir)
    except Exception:
        log_dir = Path(os.getenv("DUMPX_LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: sql-dump-extractor-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"sql-dump-extractor-{date_str}.log"


def configure_logging(level: Optional[int] = None, force: bool = False) -> None:
    """Configure stdlib logging and structlog with JSON rendering.

    Root handlers are only installed when the root logger has none, so an
    application importing this package keeps its own logging setup. Pass
    ``force=True`` (as the CLI does) to replace existing root handlers.

    Args:
        level: Explicit logging level. Defaults to the configured LOG_LEVEL.
        force: Replace handlers already attached to the root logger.
    """
    log_level = level if level is not None else _get_log_level()

    if force or not logging.root.handlers:
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if _should_log_to_file():
            handlers.append(
                TimedRotatingFileHandler(
                    filename=str(_get_log_file_path()),
                    when="midnight",
                    interval=1,
                    backupCount=30,
                    encoding="utf-8",
                )
            )
        for handler in handlers:
            handler.setLevel(log_level)

        logging.basicConfig(
            format="%(message)s",
            level=log_level,
            handlers=handlers,
            force=force,
        )

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
configure_logging()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(dump="backup.sql", table="users")
        >>> logger.debug("extractor.statement_dispatched", rows=120)
    """
    return structlog.get_logger().bind(**kwargs)
