from __future__ import annotations

import logging
import os
from enum import Enum

from semrange.ranges import TRACE

ENV_DEBUG = "SEMRANGE_DEBUG"

logging.addLevelName(TRACE, "TRACE")


class LogLevel(str, Enum):
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}


def parse_log_level(value: str | None) -> LogLevel | None:
    text = (value or "").strip().lower()
    if text == "warning":
        text = "warn"
    try:
        return LogLevel(text)
    except ValueError:
        return None


def check_log_level(*candidates: str | None) -> LogLevel:
    """First recognized level among ``candidates``, else debug/warn by env."""
    for value in candidates:
        level = parse_log_level(value)
        if level is not None:
            return level
    if os.getenv(ENV_DEBUG):
        return LogLevel.DEBUG
    return LogLevel.WARN


def setup_logging(verbose: bool, *levels: str | None) -> LogLevel:
    level = LogLevel.DEBUG if verbose else check_log_level(*levels)
    logging.basicConfig(
        level=level.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    return level
