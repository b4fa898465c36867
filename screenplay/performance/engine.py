"""
Performance engine: runs an actor's tasks and consequences in order.

Each call to ``attempts_to`` or ``should`` is one performance, bracketed by
begin/end notifications on the performance event bus. Errors raised by the
activities are classified and reported to the step reporter; the failure
kind and the fail-fast policy decide whether the performance continues with
the next activity or the error is re-raised.
"""

from contextlib import contextmanager
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, List, Optional

from screenplay.config.policy import should_throw_errors_immediately
from screenplay.core.interfaces import Consequence, Performable, StepReporter
from screenplay.core.types import FailureKind
from screenplay.error_handling.classifier import classify_failure
from screenplay.monitoring.logger import get_logger
from screenplay.performance.events import PerformanceEventBus, get_event_bus
from screenplay.performance.task_tally import PerformedTaskTally
from screenplay.reporting.event_bus_interface import EventBusInterface

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor

logger = get_logger(__name__)


class PerformanceEngine:
    """
    Sequences the performances of one actor.

    Not safe for concurrent use: one thread drives an actor at a time.
    """

    def __init__(
        self,
        reporter: Optional[StepReporter] = None,
        event_bus: Optional[PerformanceEventBus] = None,
        fail_fast: Callable[[], bool] = should_throw_errors_immediately,
        task_tally: Optional[PerformedTaskTally] = None,
    ):
        """
        Initialize the engine.

        Args:
            reporter: Step reporter (defaults to the process-wide step event bus)
            event_bus: Performance event bus (defaults to the process-wide bus)
            fail_fast: Fail-fast policy, consulted on every error
            task_tally: Tally of tasks attempted in the current performance
        """
        self.reporter = reporter or EventBusInterface()
        self._event_bus = event_bus
        self._fail_fast = fail_fast
        self.task_tally = task_tally or PerformedTaskTally()
        # Tally counts of the enclosing performances
        self._saved_counts: List[int] = []

    @property
    def event_bus(self) -> PerformanceEventBus:
        return self._event_bus or get_event_bus()

    @property
    def depth(self) -> int:
        """Number of performances currently in flight (nested ones included)."""
        return len(self._saved_counts)

    @contextmanager
    def performance(self, actor: "Actor") -> Iterator[None]:
        """Bracket a performance with begin/end events, even when it aborts."""
        self._begin_performance(actor)
        try:
            yield
        finally:
            self._end_performance(actor)

    def _begin_performance(self, actor: "Actor") -> None:
        self._saved_counts.append(self.task_tally.performed_task_count)
        self.task_tally.reset()
        logger.debug(f"{actor} begins performance", extra={"actor": actor})
        self.event_bus.actor_began_performance(actor.name)

    def _end_performance(self, actor: "Actor") -> None:
        saved = self._saved_counts.pop()
        if self._saved_counts:
            # Back in the enclosing performance
            self.task_tally.restore(saved)
        logger.debug(f"{actor} ends performance", extra={"actor": actor})
        self.event_bus.actor_ended_performance(actor.name)

    def attempts_to(self, actor: "Actor", tasks: Iterable[Performable]) -> None:
        """
        Perform the tasks in order.

        Ignorable and pending errors never leave this call. Assumption
        failures always do, and other errors only under fail-fast; either
        way the remaining tasks are not attempted.
        """
        with self.performance(actor):
            for task in tasks:
                self._perform(actor, task)

    def _perform(self, actor: "Actor", task: Performable) -> None:
        reported_pending = False
        try:
            self.task_tally.new_task()
            if task.is_pending():
                self.reporter.report_step_pending()
                reported_pending = True
            logger.debug(f"{actor} attempts to {task}", extra={"actor": actor, "task": task})
            task.perform_as(actor)

            if self._an_out_of_step_error_occurred():
                self.reporter.merge_previous_step()
        except Exception as error:
            kind = classify_failure(error)
            if kind is FailureKind.IGNORABLE:
                self.reporter.report_step_ignored_for(task, error)
                return
            if kind is FailureKind.PENDING:
                if not reported_pending:
                    self.reporter.report_step_pending()
                return

            logger.warning(
                f"{actor} failed to {task}: {error}",
                extra={"actor": actor, "task": task},
            )
            self.reporter.report_step_failure_for(task, error)
            if kind is FailureKind.ASSUMPTION_FAILURE or self._fail_fast():
                logger.info(
                    f"Aborting performance of {actor} after {kind.value} error",
                    extra={"actor": actor},
                )
                raise
        finally:
            self.reporter.update_overall_result()

    def _an_out_of_step_error_occurred(self) -> bool:
        """
        A failure left more reported steps than tasks attempted.

        The tally restarts with each performance while the step count covers
        the whole test, so once a step has failed, every step reported by a
        later performance in the same test is folded into the step before it.
        """
        return (
            self.reporter.a_step_has_failed()
            and self.reporter.get_step_count() > self.task_tally.performed_task_count
        )

    def should(self, actor: "Actor", consequences: Iterable[Consequence]) -> None:
        """
        Evaluate the consequences in order, each as its own step.

        Once the test is suspended or a step has failed, later consequences
        are still evaluated but their steps are marked ignored.
        """
        with self.performance(actor):
            for consequence in consequences:
                self._check(actor, consequence)

    def _check(self, actor: "Actor", consequence: Consequence) -> None:
        try:
            self.reporter.report_new_step_with_title(str(consequence))
            if (
                self.reporter.current_test_is_suspended()
                or self.reporter.a_step_in_the_current_test_has_failed()
            ):
                self.reporter.report_step_ignored()
            logger.debug(
                f"{actor} checks {consequence}",
                extra={"actor": actor, "consequence": consequence},
            )
            consequence.evaluate_for(actor)
            self.reporter.report_step_finished()
        except Exception as error:
            kind = classify_failure(error)
            if kind is FailureKind.IGNORABLE:
                self.reporter.report_step_ignored()
                self.reporter.report_step_finished()
                return

            logger.warning(
                f"{actor} found that {consequence} does not hold: {error}",
                extra={"actor": actor, "consequence": consequence},
            )
            self.reporter.report_step_failure_for(consequence, error)
            if kind is FailureKind.ASSUMPTION_FAILURE or self._fail_fast():
                raise
        finally:
            self.reporter.update_overall_result()
