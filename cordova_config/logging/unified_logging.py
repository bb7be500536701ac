"""
Unified logging format with importance (0-10) for CLI log output.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

# Default importance (0-10) per standard level when not set explicitly
LEVEL_TO_IMPORTANCE = {
    "DEBUG": 2,
    "INFO": 4,
    "WARNING": 6,
    "ERROR": 8,
    "CRITICAL": 10,
}

UNIFIED_DATE_FMT = "%Y-%m-%d %H:%M:%S"
UNIFIED_FORMAT_STR = "%(asctime)s | %(levelname)-8s | %(importance)s | %(message)s"

# Logger that owns the handler installed by setup_logging
PACKAGE_LOGGER = "cordova_config"


def importance_from_level(level_name: str) -> int:
    """Return importance 0-10 for a standard log level name. Returns 4 for unknown."""
    return LEVEL_TO_IMPORTANCE.get((level_name or "").strip().upper(), 4)


def _set_importance_if_missing(record: logging.LogRecord) -> None:
    """Set record.importance from level if not already set (by extra or factory)."""
    if getattr(record, "importance", None) is None:
        record.importance = importance_from_level(record.levelname)


def install_unified_record_factory() -> None:
    """
    Install a LogRecord factory that sets 'importance' on every record.
    Importance is taken from record.extra['importance'] or derived from level.
    Does nothing when the current factory is already this one.
    """
    old_factory = logging.getLogRecordFactory()
    if getattr(old_factory, "_unified_importance", False):
        return

    def _factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        _set_importance_if_missing(record)
        return record

    _factory._unified_importance = True  # type: ignore[attr-defined]
    logging.setLogRecordFactory(_factory)


class UnifiedFormatter(logging.Formatter):
    """
    Formatter that outputs: timestamp | level | importance | message.
    Importance is taken from record.importance (set by extra or by record factory).
    Fallback: sets importance from level when factory was not installed.
    """

    def format(self, record: logging.LogRecord) -> str:
        _set_importance_if_missing(record)
        return super().format(record)


def create_unified_formatter(
    fmt: str = UNIFIED_FORMAT_STR,
    datefmt: str = UNIFIED_DATE_FMT,
) -> UnifiedFormatter:
    """Create a UnifiedFormatter with project default format and date format."""
    return UnifiedFormatter(fmt=fmt, datefmt=datefmt)


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Handler:
    """
    Attach a unified-format handler to the package logger.

    Logs go to log_file when given, otherwise to stderr. Calling it again
    replaces the handler installed by the previous call.

    Returns:
        The installed handler
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_cordova_config_handler", False):
            logger.removeHandler(handler)
            handler.close()

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(str(log_file), encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(create_unified_formatter())
    handler._cordova_config_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
