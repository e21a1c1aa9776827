"""Console logging for the thoth-hr scripts and store.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed once by the entry point through :func:`setup_logging`.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from thoth_hr.config import HrConfig

PACKAGE_LOGGER = "thoth_hr"
STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers kept at WARNING or above whatever the requested level
NOISY_LOGGERS = ("psycopg", "faker")

_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Replace the root handlers with one console handler.

    Parameters
    ----------
    level : str
        Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown names
        fall back to INFO.
    format_type : str
        "standard" for pipe-separated text, "json" for one object per line.
    stream : TextIO | None
        Destination (default: stdout).

    Returns
    -------
    logging.Handler
        The installed handler.
    """
    log_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    if format_type == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
    return handler


def configure_logging(config: HrConfig) -> logging.Handler:
    """Set up logging from ``config.log_level`` and ``config.log_format``."""
    return setup_logging(config.log_level, config.log_format)


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Fields passed through ``extra=`` are added as top-level keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Parameters
    ----------
    name : str
        Logger name (usually ``__name__``).

    Returns
    -------
    logging.Logger
        Logger under the root handler installed by :func:`setup_logging`.
    """
    return logging.getLogger(name)
