"""
Error handling for the screenplay engine.

Provides the exception types that steer a performance and the classifier
that maps a raised error to the way it is reported and propagated.
"""

from .exceptions import (
    ScreenplayError,
    IgnoreStepError,
    PendingStepError,
    AssumptionFailure,
    NoAbilityError,
    NoSuitableConstructorError,
)

from .classifier import (
    classify_failure,
    is_assumption_failure,
    is_pending_or_ignored,
)

__all__ = [
    # Exceptions
    "ScreenplayError",
    "IgnoreStepError",
    "PendingStepError",
    "AssumptionFailure",
    "NoAbilityError",
    "NoSuitableConstructorError",

    # Classification
    "classify_failure",
    "is_assumption_failure",
    "is_pending_or_ignored",
]
