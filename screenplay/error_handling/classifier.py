"""Map errors raised by tasks and consequences to a FailureKind."""

import unittest

from screenplay.core.types import FailureKind
from screenplay.error_handling.exceptions import (
    AssumptionFailure,
    IgnoreStepError,
    PendingStepError,
)

ASSUMPTION_ERRORS = (AssumptionFailure, unittest.SkipTest)


def classify_failure(error: BaseException) -> FailureKind:
    """
    Classify an error by its type, never by its message.

    Args:
        error: The error raised while performing a task or evaluating a consequence

    Returns:
        The failure kind deciding how the engine reports and propagates it
    """
    if isinstance(error, IgnoreStepError):
        return FailureKind.IGNORABLE
    if isinstance(error, PendingStepError):
        return FailureKind.PENDING
    if isinstance(error, ASSUMPTION_ERRORS):
        return FailureKind.ASSUMPTION_FAILURE
    return FailureKind.FATAL


def is_pending_or_ignored(error: BaseException) -> bool:
    """Errors the engine absorbs without reporting a step failure."""
    return classify_failure(error) in (FailureKind.IGNORABLE, FailureKind.PENDING)


def is_assumption_failure(error: BaseException) -> bool:
    return classify_failure(error) is FailureKind.ASSUMPTION_FAILURE
