"""
Performance module exports.
"""

from screenplay.performance.engine import PerformanceEngine
from screenplay.performance.events import (
    PerformanceEventBus,
    get_event_bus,
    reset_event_bus,
)
from screenplay.performance.task_tally import PerformedTaskTally

__all__ = [
    "PerformanceEngine",
    "PerformanceEventBus",
    "PerformedTaskTally",
    "get_event_bus",
    "reset_event_bus",
]
