"""Logging helpers."""

from mecene.infrastructure.monitoring.logger import (
    JSONFormatter,
    get_logger,
    log_performance,
    setup_logging,
)

__all__ = [
    "JSONFormatter",
    "get_logger",
    "log_performance",
    "setup_logging",
]
