"""
Logging for the film development calculator.

All loggers live under the ``filmdev`` package logger. Console output goes
to stderr so command output on stdout stays machine readable; an optional
log file always receives JSON records.

Usage:
    from filmdev.core.logging import get_logger, setup_logging

    setup_logging(level="DEBUG", json_format=True)

    logger = get_logger(__name__)
    with LogContext(film_id="tri-x-400", developer_id="d76"):
        logger.info("Calculating")
"""

import json
import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TextIO

PACKAGE_LOGGER = "filmdev"

CONSOLE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"

# Fields set by LogContext, shared by every record emitted inside the block
_log_context: ContextVar[dict[str, Any]] = ContextVar("filmdev_log_context", default={})

# Record attributes passed through ``extra=`` that JSON output keeps
_EXTRA_FIELDS = (
    "film_id",
    "developer_id",
    "operation",
    "backend",
    "duration_seconds",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        context = _log_context.get()
        if context:
            payload["context"] = dict(context)

        payload.update(
            {name: getattr(record, name) for name in _EXTRA_FIELDS if hasattr(record, name)}
        )

        if record.exc_info and record.exc_info[0] is not None:
            payload["exception_type"] = record.exc_info[0].__name__
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name on a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[2m",  # dim
        logging.INFO: "\033[32m",  # green
        logging.WARNING: "\033[33m",  # yellow
        logging.ERROR: "\033[31m",  # red
        logging.CRITICAL: "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, "")
        colored.levelname = f"{color}{record.levelname:<7}{self.RESET}"
        return super().format(colored)


_configured = False


def _console_handler(stream: TextIO, json_format: bool, colored: bool) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    if json_format:
        handler.setFormatter(JSONFormatter())
    elif colored and stream.isatty():
        handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
    return handler


def setup_logging(
    level: str | None = None,
    log_file: Path | None = None,
    json_format: bool = False,
    colored: bool = True,
) -> None:
    """Install handlers on the package logger.

    Calling again replaces the handlers from the previous call.

    Args:
        level: Level name, any case. Defaults to ``Settings.log_level``.
        log_file: Also write JSON records to this file.
        json_format: Emit JSON on the console too.
        colored: Color level names when stderr is a terminal.
    """
    global _configured

    # Deferred: config imports core, which imports this module
    from filmdev.config import get_settings

    level_name = (level or get_settings().log_level).upper()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level_name)
    package_logger.handlers.clear()
    package_logger.addHandler(_console_handler(sys.stderr, json_format, colored))

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        package_logger.addHandler(file_handler)

    _configured = True
    package_logger.debug(f"Logging at {level_name}, file={log_file}, json={json_format}")


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``filmdev`` namespace, configuring logging on first use."""
    if not _configured:
        setup_logging()

    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


class LogContext:
    """Attach fields to every JSON record emitted inside a ``with`` block.

    Example:
        with LogContext(film_id="hp5-400"):
            with LogContext(developer_id="id11"):
                logger.info("...")  # context has both fields
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._token = None

    def __enter__(self) -> "LogContext":
        self._token = _log_context.set({**_log_context.get(), **self.fields})
        return self

    def __exit__(self, *exc_info: Any) -> None:
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


def current_log_context() -> dict[str, Any]:
    """Copy of the fields attached by enclosing LogContext blocks."""
    return dict(_log_context.get())


@contextmanager
def log_duration(
    logger: logging.Logger, operation: str, level: int = logging.DEBUG
) -> Iterator[None]:
    """Log how long the wrapped block took, tagged with ``operation``."""
    start = time.perf_counter()
    yield
    elapsed = round(time.perf_counter() - start, 4)
    logger.log(
        level,
        f"{operation} took {elapsed}s",
        extra={"operation": operation, "duration_seconds": elapsed},
    )


class LoggingMixin:
    """Gives a class a ``logger`` named after its module."""

    @property
    def logger(self) -> logging.Logger:
        return get_logger(type(self).__module__)
