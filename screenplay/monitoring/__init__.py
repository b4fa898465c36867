"""
Monitoring module exports.
"""

from screenplay.monitoring.logger import (
    ActorLogAdapter,
    JSONFormatter,
    get_logger,
    log_performance_event,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_performance_event",
    "JSONFormatter",
    "ActorLogAdapter",
]
