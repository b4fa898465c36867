"""
Adapter between actors and the step event bus.
"""

from typing import Any, Optional

from screenplay.core.interfaces import StepReporter
from screenplay.core.types import StepFailure
from screenplay.reporting.step_event_bus import StepEventBus, get_step_event_bus


class EventBusInterface(StepReporter):
    """
    Step reporter backed by a StepEventBus.

    Without an explicit bus, every call goes to the process-wide bus current
    at the time of the call, so a bus replaced between tests is picked up.
    """

    def __init__(self, step_event_bus: Optional[StepEventBus] = None):
        self._step_event_bus = step_event_bus

    @property
    def step_event_bus(self) -> StepEventBus:
        return self._step_event_bus or get_step_event_bus()

    def report_new_step_with_title(self, title: str) -> None:
        self.step_event_bus.step_started(title)

    def report_step_finished(self) -> None:
        self.step_event_bus.step_finished()

    def report_step_ignored(self) -> None:
        self.step_event_bus.step_ignored()

    def report_step_ignored_for(self, subject: Any, error: BaseException) -> None:
        """Record an ignored step titled with the task description."""
        self.step_event_bus.step_ignored_for(str(subject), error)

    def report_step_pending(self) -> None:
        self.step_event_bus.step_pending()

    def report_step_failure_for(self, subject: Any, error: BaseException) -> None:
        """Record a failure titled with the task or consequence description."""
        self.step_event_bus.step_failed(StepFailure(description=str(subject), error=error))

    def merge_previous_step(self) -> None:
        self.step_event_bus.merge_previous_step()

    def mark_test_skipped(self) -> None:
        self.step_event_bus.test_skipped()

    def mark_test_pending(self) -> None:
        self.step_event_bus.test_pending()

    def update_overall_result(self) -> None:
        self.step_event_bus.update_overall_results()

    def get_step_count(self) -> int:
        return self.step_event_bus.step_count

    def a_step_has_failed(self) -> bool:
        return self.step_event_bus.a_step_in_the_current_test_has_failed

    def current_test_is_suspended(self) -> bool:
        return self.step_event_bus.current_test_is_suspended

    def a_step_in_the_current_test_has_failed(self) -> bool:
        return self.step_event_bus.a_step_in_the_current_test_has_failed
