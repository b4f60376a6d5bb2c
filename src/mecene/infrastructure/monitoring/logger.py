"""
Structured logging configuration.

Logs go to stderr so that CLI stdout stays parseable (--json).
"""

import json
import logging
import sys
import time
from typing import Any

NOISY_LOGGERS = ("web3", "aiohttp", "urllib3", "asyncio", "mcp")


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent schema.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in ("operation", "duration_ms", "project_id"):
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        log_data["function"] = record.funcName
        log_data["line"] = record.lineno

        return json.dumps(log_data)


def setup_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """
    Configure application logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Use JSON format (True) or plain text (False)
    """
    numeric_level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)

    if json_logs:
        formatter = JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S")
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """
    Get logger with given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_performance(
    logger: logging.Logger, operation: str, start_time: float
) -> None:
    """
    Log duration of an operation at DEBUG level.

    Args:
        logger: Logger instance
        operation: Operation name
        start_time: Start timestamp from time.time()
    """
    duration_ms = (time.time() - start_time) * 1000
    logger.debug(
        f"{operation} completed in {duration_ms:.1f}ms",
        extra={
            "operation": operation,
            "duration_ms": round(duration_ms, 2),
        },
    )
