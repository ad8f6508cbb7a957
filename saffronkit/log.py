"""Named console loggers whose entries are also broadcast to subscribers."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Dict, Optional

from saffronkit.subscriber_list import SubscriberList

DEFAULT_LOGGER = "default"


class Level(IntEnum):
    """Log severities, from least to most severe."""

    DEBUG = -1
    INFO = 0
    WARN = 1
    ERROR = 2
    DPANIC = 3
    PANIC = 4
    FATAL = 5

    @property
    def logging_level(self) -> int:
        """The matching standard-library logging level."""
        return _TO_LOGGING[self]

    @classmethod
    def from_logging(cls, levelno: int) -> Level:
        """The level matching a standard-library logging level number."""
        if levelno <= logging.DEBUG:
            return cls.DEBUG
        if levelno <= logging.INFO:
            return cls.INFO
        if levelno <= logging.WARNING:
            return cls.WARN
        if levelno <= logging.ERROR:
            return cls.ERROR
        return cls.FATAL


_TO_LOGGING = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.DPANIC: logging.CRITICAL,
    Level.PANIC: logging.CRITICAL,
    Level.FATAL: logging.CRITICAL,
}


@dataclass(frozen=True)
class LogEntry:
    """One written log message."""

    level: Level
    message: str
    logger_name: str
    time: datetime


class PanicError(RuntimeError):
    """Raised after a message is logged at the panic level."""


on_log: SubscriberList[LogEntry] = SubscriberList()

LOGGERS: Dict[str, logging.Logger] = {}

logger: Optional[logging.Logger] = None


class _ConsoleTriggerHandler(logging.Handler):
    """Writes records to standard output, then notifies log subscribers."""

    def __init__(self, display_name: str) -> None:
        super().__init__(logging.DEBUG)
        self.display_name = display_name

    def emit(self, record: logging.LogRecord) -> None:
        level = getattr(record, "saffron_level", None)
        if level is None:
            level = Level.from_logging(record.levelno)
        entry = LogEntry(
            level=level,
            message=record.getMessage(),
            logger_name=self.display_name,
            time=datetime.fromtimestamp(record.created),
        )
        parts = [entry.time.isoformat(timespec="milliseconds"), level.name]
        if self.display_name:
            parts.append(self.display_name)
        parts.append(entry.message)
        try:
            sys.stdout.write("\t".join(parts) + "\n")
            sys.stdout.flush()
        except Exception:
            self.handleError(record)
        on_log.trigger(entry)


def get_logger(name: str) -> logging.Logger:
    """Return the logger with this name, creating it on first use."""
    existing = LOGGERS.get(name)
    if existing is not None:
        return existing

    display_name = "" if name == DEFAULT_LOGGER else name
    new_logger = logging.getLogger(f"{__name__}.{name}")
    new_logger.setLevel(logging.DEBUG)
    new_logger.propagate = False
    for handler in list(new_logger.handlers):
        new_logger.removeHandler(handler)
    new_logger.addHandler(_ConsoleTriggerHandler(display_name))
    LOGGERS[name] = new_logger
    return new_logger


def setup_logger() -> logging.Logger:
    """Install the default logger used by the module-level functions."""
    global logger
    logger = get_logger(DEFAULT_LOGGER)
    return logger


def _join(args: tuple) -> str:
    return " ".join(str(arg) for arg in args)


def log(level: Level, *args: object) -> None:
    """Log the arguments, joined by spaces, at the given level.

    The panic level raises PanicError and the fatal level exits with
    status 1, both after the message is written.
    """
    active = logger if logger is not None else setup_logger()
    level = Level(level)
    message = _join(args)
    active.log(level.logging_level, message, extra={"saffron_level": level})
    if level is Level.PANIC:
        raise PanicError(message)
    if level is Level.FATAL:
        raise SystemExit(1)


def debug(*args: object) -> None:
    log(Level.DEBUG, *args)


def info(*args: object) -> None:
    log(Level.INFO, *args)


def warn(*args: object) -> None:
    log(Level.WARN, *args)


def error(*args: object) -> None:
    log(Level.ERROR, *args)


def fatal(*args: object) -> None:
    """Log at the fatal level and exit with status 1."""
    log(Level.FATAL, *args)