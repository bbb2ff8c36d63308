"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from blogger.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from blogger.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
