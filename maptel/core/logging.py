"""Logging configuration.

Provides JSON-formatted logging and the per-operation diagnostic trace.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from maptel.core import config

TRACE_LOGGER = "maptel"


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k in ("operation", "table_id", "route", "remote_addr"):
            if hasattr(record, k):
                payload[k] = getattr(record, k)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    log_file: str = None,
    log_level: str = None,
    debug: bool = None,
):
    """Configure logging with JSON formatter.

    Args:
        log_file: Path to log file. Defaults to MAPTEL_LOG_FILE; no file when empty.
        log_level: Log level. Defaults to MAPTEL_LOG_LEVEL or 'INFO'.
        debug: Enable the operation trace. Defaults to MAPTEL_DEBUG.
    """
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(JsonFormatter())
    handlers = [console_handler]

    log_file = log_file or config.LOG_FILE
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(JsonFormatter())
        handlers.append(file_handler)

    root = logging.getLogger()
    log_level = (log_level or config.LOG_LEVEL).upper()
    root.setLevel(getattr(logging, log_level, logging.INFO))
    root.handlers = handlers

    debug = config.DEBUG if debug is None else debug
    if debug:
        logging.getLogger(TRACE_LOGGER).setLevel(logging.DEBUG)


def log_call(logger: logging.Logger, operation: str, *args) -> None:
    """Trace an operation call as ``maptel: name(arg, ...)``."""
    if logger.isEnabledFor(logging.DEBUG):
        params = ", ".join(str(a) for a in args)
        logger.debug(f"maptel: {operation}({params})", extra={"operation": operation})


def log_outcome(logger: logging.Logger, operation: str, message: str) -> None:
    """Trace an operation outcome as ``maptel: name: message``."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"maptel: {operation}: {message}", extra={"operation": operation})
