"""
Logging configuration for applications embedding geocoord.

The library itself only creates module loggers. ``setup_logging`` is for
scripts and services that want console/file output configured from the
GEOCOORD_* settings.
"""

import json
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from geocoord.core.config import settings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEV_CONSOLE_FORMAT = "%(levelname)s | %(asctime)s | %(name)s:%(lineno)d | %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(asctime)s - %(name)s - %(message)s"
FILE_FORMAT = (
    "%(asctime)s - %(levelname)s - %(name)s - "
    "%(module)s:%(funcName)s:%(lineno)d - %(message)s"
)

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Attributes every LogRecord carries; anything else was passed as extra
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record, for log aggregation.

    Fields passed through ``extra=`` or added by ``LogContext`` appear as
    top-level keys next to the standard ones.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES
        )
        return json.dumps(entry, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name with ANSI codes."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        # Other handlers see the same record; color a copy
        colored = logging.makeLogRecord(vars(record))
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def get_log_level(level_name: str) -> int:
    """
    Map a level name (case-insensitive) to its ``logging`` constant.

    Unknown names map to INFO.
    """
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if settings.environment == "development":
        handler.setFormatter(ColoredFormatter(DEV_CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler(log_file: Path, level: int, json_logs: bool) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    json_logs: Optional[bool] = None,
    enable_console: bool = True,
) -> None:
    """
    Configure root logging.

    Existing root handlers are replaced.

    Args:
        log_level: Level name; defaults to ``settings.log_level``
        log_file: Rotating log file, if file logging is wanted
        json_logs: Write file logs as JSON; defaults to ``settings.json_logs``
        enable_console: Whether to log to stdout
    """
    log_level = log_level or settings.log_level
    if json_logs is None:
        json_logs = settings.json_logs
    level = get_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if enable_console:
        root_logger.addHandler(_console_handler(level))
    if log_file:
        root_logger.addHandler(_file_handler(Path(log_file), level, json_logs))

    # pyproj logs PROJ database lookups at DEBUG
    logging.getLogger("pyproj").setLevel(max(level, logging.INFO))

    root_logger.info(
        "Logging initialized: level=%s, environment=%s, json_logs=%s, console=%s, file=%s",
        log_level,
        settings.environment,
        json_logs,
        enable_console,
        log_file is not None,
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (typically ``__name__``)."""
    return logging.getLogger(name)


class LogContext:
    """
    Add fields to every log record created inside the ``with`` block.

    Usage:
        with LogContext(batch_id="import-42"):
            for line in lines:
                parse_mgrs(line)
    """

    def __init__(self, **fields: Any):
        self.context = fields
        self._previous: Optional[Callable[..., logging.LogRecord]] = None

    def __enter__(self) -> "LogContext":
        previous = logging.getLogRecordFactory()
        context = self.context

        def factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = previous(*args, **kwargs)
            record.__dict__.update(context)
            return record

        self._previous = previous
        logging.setLogRecordFactory(factory)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._previous is not None:
            logging.setLogRecordFactory(self._previous)
            self._previous = None


def add_log_context(**fields: Any) -> LogContext:
    """Shorthand for ``LogContext(**fields)``."""
    return LogContext(**fields)
