"""
Step reporting exports.
"""

from screenplay.reporting.event_bus_interface import EventBusInterface
from screenplay.reporting.step_event_bus import (
    StepEventBus,
    get_step_event_bus,
    reset_step_event_bus,
)
from screenplay.reporting.steps import step

__all__ = [
    "StepEventBus",
    "EventBusInterface",
    "get_step_event_bus",
    "reset_step_event_bus",
    "step",
]
