"""
Screenplay-pattern execution engine.

Actors perform ordered tasks and check consequences while reporting each
step to a shared step event bus.
"""

from screenplay.actors import Actor
from screenplay.core import Ability, Consequence, Performable, Question
from screenplay.error_handling import (
    AssumptionFailure,
    IgnoreStepError,
    PendingStepError,
)
from screenplay.reporting import step

__version__ = "0.1.0"

__all__ = [
    "Actor",
    "Ability",
    "Consequence",
    "Performable",
    "Question",
    "AssumptionFailure",
    "IgnoreStepError",
    "PendingStepError",
    "step",
]
