"""
Decorator that reports a task method as a step.
"""

import functools
from typing import Any, Callable, Optional, TypeVar

from screenplay.core.types import StepFailure
from screenplay.error_handling.exceptions import IgnoreStepError, PendingStepError
from screenplay.reporting.step_event_bus import StepEventBus, get_step_event_bus

F = TypeVar("F", bound=Callable[..., Any])


def step(title: str, step_event_bus: Optional[StepEventBus] = None) -> Callable[[F], F]:
    """
    Report each call of the decorated ``perform_as``-style method as a step.

    The title is a format string: ``{0}`` is the actor and ``{task}`` the
    instance the method is bound to, e.g. ``"{0} searches for {task.term}"``.
    Errors are recorded on the step and re-raised so the performance engine
    can decide whether to continue.

    Args:
        title: Step title template
        step_event_bus: Bus to report to (defaults to the process-wide bus)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(task: Any, actor: Any, *args: Any, **kwargs: Any) -> Any:
            bus = step_event_bus or get_step_event_bus()
            record = bus.step_started(title.format(actor, task=task))
            try:
                result = func(task, actor, *args, **kwargs)
            except IgnoreStepError as error:
                record.cause = error
                bus.step_ignored()
                bus.step_finished()
                raise
            except PendingStepError as error:
                record.cause = error
                bus.step_pending()
                bus.step_finished()
                raise
            except Exception as error:
                bus.step_failed(StepFailure(description=str(task), error=error))
                raise
            bus.step_finished()
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
