"""
Core module exports.
"""

from screenplay.core.interfaces import (
    Ability,
    Consequence,
    Page,
    Performable,
    Question,
    StepReporter,
)
from screenplay.core.types import (
    FailureKind,
    PerformanceEvent,
    PerformanceEventType,
    StepFailure,
    StepRecord,
    StepResult,
    most_severe,
)

__all__ = [
    # Interfaces
    "Performable",
    "Consequence",
    "Question",
    "Ability",
    "StepReporter",
    "Page",
    # Types
    "StepResult",
    "FailureKind",
    "StepFailure",
    "StepRecord",
    "PerformanceEvent",
    "PerformanceEventType",
    "most_severe",
]
