"""
In-memory step reporting bus for a test run.

Records the steps reported while a test runs, including nested steps, and
derives the overall test result from them. One bus is shared by the whole
process; the test runner starts and finishes tests on it, actors only report
into it.
"""

import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from screenplay.core.types import StepFailure, StepRecord, StepResult, most_severe
from screenplay.monitoring.logger import get_logger

logger = get_logger(__name__)


class StepEventBus:
    """
    Tracks the step tree and state of the test currently running.

    Steps started while another step is open are nested under it. The test
    becomes suspended once a step fails or the test is marked pending or
    skipped; later steps can then be reported as ignored.
    """

    def __init__(self):
        """Initialize the step event bus."""
        self._lock = threading.RLock()
        self._test_name: Optional[str] = None
        self._steps: List[StepRecord] = []
        self._open_steps: List[StepRecord] = []
        self._test_marker: Optional[StepResult] = None
        self._suspended = False
        self._test_result = StepResult.UNDEFINED

    # Test lifecycle

    def test_started(self, test_name: str) -> None:
        """Start recording a new test, discarding the previous one."""
        with self._lock:
            self._clear()
            self._test_name = test_name
            logger.debug(f"Test started: {test_name}")

    def test_finished(self) -> StepResult:
        """Close any steps left open and return the final test result."""
        with self._lock:
            while self._open_steps:
                self.step_finished()
            self.update_overall_results()
            logger.debug(
                f"Test finished: {self._test_name}",
                extra={"step": self._test_result.value},
            )
            return self._test_result

    def reset(self) -> None:
        """Forget the current test entirely."""
        with self._lock:
            self._clear()
            self._test_name = None

    def _clear(self) -> None:
        self._steps = []
        self._open_steps = []
        self._test_marker = None
        self._suspended = False
        self._test_result = StepResult.UNDEFINED

    # Steps

    def step_started(self, description: str) -> StepRecord:
        """Open a new step, nested under the currently open step if any."""
        with self._lock:
            step = StepRecord(description=description)
            if self._open_steps:
                self._open_steps[-1].children.append(step)
            else:
                self._steps.append(step)
            self._open_steps.append(step)
            return step

    def step_finished(self) -> None:
        """Close the current step, keeping an ignored or pending result."""
        with self._lock:
            step = self._pop_open_step()
            if step is None:
                return
            if step.result == StepResult.UNDEFINED:
                step.result = StepResult.SUCCESS

    def step_ignored(self) -> None:
        """Mark the current step as ignored."""
        with self._lock:
            step = self._current_step()
            if step is not None:
                step.result = StepResult.IGNORED

    def step_ignored_for(self, description: str, error: Optional[BaseException] = None) -> None:
        """
        Record a closed, ignored step for an activity that was abandoned.

        The step sits where the activity ran, under the open step if any.
        Nothing is added when the latest step there already carries the
        error (the activity's own step recorded it before re-raising).
        """
        with self._lock:
            siblings = self._open_steps[-1].children if self._open_steps else self._steps
            if error is not None and siblings and _carries_error(siblings[-1], error):
                return
            step = self.step_started(description)
            step.result = StepResult.IGNORED
            step.cause = error
            self.step_finished()

    def step_pending(self) -> None:
        """Mark the current step pending, or the whole test when no step is open."""
        with self._lock:
            step = self._current_step()
            if step is not None:
                step.result = StepResult.PENDING
            else:
                self._test_marker = StepResult.PENDING
            self._suspended = True

    def step_failed(self, failure: StepFailure) -> None:
        """
        Record a failure.

        Fails and closes the current step when one is open. Otherwise a
        failed top-level step is added, unless the latest step already
        carries this very error (a step reported it before re-raising).
        """
        with self._lock:
            step = self._pop_open_step()
            if step is None:
                latest = self._steps[-1] if self._steps else None
                if latest is not None and _carries_error(latest, failure.error):
                    self._suspended = True
                    return
                step = StepRecord(description=failure.description)
                step.finished_at = datetime.now(timezone.utc)
                self._steps.append(step)

            step.result = failure.result
            step.failure = failure
            self._suspended = True
            logger.debug(
                f"Step failed: {step.description}",
                extra={"step": failure.message},
            )

    def merge_previous_step(self) -> None:
        """Fold the latest top-level step into the one before it."""
        with self._lock:
            if len(self._steps) < 2:
                return
            latest = self._steps.pop()
            previous = self._steps[-1]
            previous.children.append(latest)
            if latest.failure is not None and previous.failure is None:
                previous.failure = latest.failure
            previous.result = most_severe([previous.result, latest.result])

    # Test state

    def test_skipped(self) -> None:
        with self._lock:
            self._test_marker = StepResult.SKIPPED
            self._suspended = True

    def test_pending(self) -> None:
        with self._lock:
            self._test_marker = StepResult.PENDING
            self._suspended = True

    def suspend_test(self) -> None:
        with self._lock:
            self._suspended = True

    def update_overall_results(self) -> StepResult:
        """Recompute the test result from the recorded steps."""
        with self._lock:
            results = [step.overall_result for step in self._steps]
            if self._test_marker is not None:
                results.append(self._test_marker)
            self._test_result = most_severe(results)
            return self._test_result

    # Queries

    @property
    def test_name(self) -> Optional[str]:
        return self._test_name

    @property
    def step_count(self) -> int:
        """Number of top-level steps in the current test."""
        with self._lock:
            return len(self._steps)

    @property
    def steps(self) -> List[StepRecord]:
        with self._lock:
            return list(self._steps)

    @property
    def test_result(self) -> StepResult:
        return self._test_result

    @property
    def a_step_in_the_current_test_has_failed(self) -> bool:
        with self._lock:
            return any(step.overall_result.is_unsuccessful for step in self._steps)

    @property
    def current_test_is_suspended(self) -> bool:
        return self._suspended

    def get_summary(self) -> Dict[str, Any]:
        """Step counts per result for the current test."""
        with self._lock:
            counts: Dict[str, int] = {}
            for step in self._steps:
                result = step.overall_result.value
                counts[result] = counts.get(result, 0) + 1
            return {
                "test_name": self._test_name,
                "result": self._test_result.value,
                "step_count": len(self._steps),
                "results": counts,
            }

    def _current_step(self) -> Optional[StepRecord]:
        return self._open_steps[-1] if self._open_steps else None

    def _pop_open_step(self) -> Optional[StepRecord]:
        if not self._open_steps:
            return None
        step = self._open_steps.pop()
        step.finished_at = datetime.now(timezone.utc)
        return step


def _carries_error(step: StepRecord, error: BaseException) -> bool:
    if step.failure is not None and step.failure.error is error:
        return True
    if step.cause is error:
        return True
    return any(_carries_error(child, error) for child in step.children)


_step_event_bus: Optional[StepEventBus] = None
_bus_lock = threading.Lock()


def get_step_event_bus() -> StepEventBus:
    """Get the process-wide step event bus."""
    global _step_event_bus
    with _bus_lock:
        if _step_event_bus is None:
            _step_event_bus = StepEventBus()
        return _step_event_bus


def reset_step_event_bus() -> None:
    """Drop the process-wide step event bus so the next access builds a new one."""
    global _step_event_bus
    with _bus_lock:
        _step_event_bus = None
