"""
Tests for the in-memory step event bus and its reporter adapter.
"""

import pytest

from screenplay.core.types import StepFailure, StepResult
from screenplay.error_handling.exceptions import IgnoreStepError
from screenplay.reporting.event_bus_interface import EventBusInterface
from screenplay.reporting.step_event_bus import (
    StepEventBus,
    get_step_event_bus,
    reset_step_event_bus,
)


@pytest.fixture
def bus():
    step_event_bus = StepEventBus()
    step_event_bus.test_started("checkout works")
    return step_event_bus


class TestStepLifecycle:
    """Tests for starting, finishing and nesting steps."""

    def test_finished_step_succeeds(self, bus):
        bus.step_started("open the shop")
        bus.step_finished()

        assert bus.step_count == 1
        assert bus.steps[0].result == StepResult.SUCCESS
        assert not bus.steps[0].is_open

    def test_steps_started_inside_a_step_are_nested(self, bus):
        bus.step_started("buy a book")
        bus.step_started("search for the book")
        bus.step_finished()
        bus.step_finished()

        assert bus.step_count == 1
        assert [c.description for c in bus.steps[0].children] == ["search for the book"]

    def test_ignored_result_survives_finish(self, bus):
        bus.step_started("check the basket")
        bus.step_ignored()
        bus.step_finished()

        assert bus.steps[0].result == StepResult.IGNORED

    def test_ignored_for_adds_a_closed_step_under_the_open_one(self, bus):
        error = IgnoreStepError()
        bus.step_started("buy a book")
        bus.step_ignored_for("leave a review", error)
        bus.step_finished()

        parent = bus.steps[0]
        assert parent.result == StepResult.SUCCESS
        assert parent.children[0].description == "leave a review"
        assert parent.children[0].result == StepResult.IGNORED
        assert parent.children[0].cause is error
        assert not parent.children[0].is_open

    def test_ignored_for_skips_a_step_already_carrying_the_error(self, bus):
        error = IgnoreStepError()
        step = bus.step_started("leave a review")
        step.cause = error
        bus.step_ignored()
        bus.step_finished()

        bus.step_ignored_for("leave review", error)

        assert bus.step_count == 1
        assert bus.steps[0].description == "leave a review"

    def test_pending_without_open_step_marks_the_test(self, bus):
        bus.step_pending()

        assert bus.current_test_is_suspended
        assert bus.update_overall_results() == StepResult.PENDING

    def test_finishing_with_nothing_open_is_harmless(self, bus):
        bus.step_finished()

        assert bus.step_count == 0


class TestStepFailures:
    """Tests for recording failures."""

    def test_failure_closes_the_open_step(self, bus):
        error = AssertionError("expected 3")
        bus.step_started("check the total")
        bus.step_failed(StepFailure(description="check the total", error=error))

        step = bus.steps[0]
        assert step.result == StepResult.FAILURE
        assert step.failure.error is error
        assert not step.is_open
        assert bus.a_step_in_the_current_test_has_failed
        assert bus.current_test_is_suspended

    def test_failure_without_open_step_adds_a_step(self, bus):
        bus.step_failed(StepFailure(description="pay", error=ValueError("card declined")))

        assert bus.step_count == 1
        assert bus.steps[0].description == "pay"
        assert bus.steps[0].result == StepResult.ERROR

    def test_same_error_is_not_recorded_twice(self, bus):
        error = RuntimeError("timeout")
        bus.step_started("pay")
        bus.step_failed(StepFailure(description="pay", error=error))
        bus.step_failed(StepFailure(description="pay", error=error))

        assert bus.step_count == 1

    def test_overall_result_is_most_severe(self, bus):
        bus.step_started("a")
        bus.step_finished()
        bus.step_started("b")
        bus.step_failed(StepFailure(description="b", error=AssertionError()))
        bus.step_started("c")
        bus.step_ignored()
        bus.step_finished()

        assert bus.update_overall_results() == StepResult.FAILURE
        assert bus.get_summary()["results"] == {"success": 1, "failure": 1, "ignored": 1}

    def test_merge_previous_step(self, bus):
        bus.step_started("first")
        bus.step_finished()
        bus.step_started("second")
        bus.step_failed(StepFailure(description="second", error=ValueError()))

        bus.merge_previous_step()

        assert bus.step_count == 1
        merged = bus.steps[0]
        assert merged.children[0].description == "second"
        assert merged.result == StepResult.ERROR
        assert merged.failure is not None

    def test_merge_with_a_single_step_does_nothing(self, bus):
        bus.step_started("only")
        bus.step_finished()

        bus.merge_previous_step()

        assert bus.step_count == 1


class TestTestLifecycle:
    """Tests for per-test state."""

    def test_test_started_clears_previous_test(self, bus):
        bus.step_failed(StepFailure(description="x", error=ValueError()))
        bus.test_skipped()

        bus.test_started("next test")

        assert bus.test_name == "next test"
        assert bus.step_count == 0
        assert not bus.current_test_is_suspended
        assert not bus.a_step_in_the_current_test_has_failed

    def test_test_finished_closes_open_steps(self, bus):
        bus.step_started("outer")
        bus.step_started("inner")

        assert bus.test_finished() == StepResult.SUCCESS
        assert not bus.steps[0].is_open

    def test_skipped_test(self, bus):
        bus.test_skipped()

        assert bus.update_overall_results() == StepResult.SKIPPED

    def test_process_wide_bus_is_replaced_on_reset(self):
        first = get_step_event_bus()
        assert get_step_event_bus() is first

        reset_step_event_bus()

        assert get_step_event_bus() is not first


class TestEventBusInterface:
    """Tests for the reporter adapter."""

    def test_failure_is_titled_with_the_subject(self, bus):
        class Checkout:
            def __str__(self):
                return "check out the basket"

        reporter = EventBusInterface(bus)
        reporter.report_step_failure_for(Checkout(), ValueError("empty"))

        assert bus.steps[0].description == "check out the basket"
        assert reporter.a_step_has_failed()
        assert reporter.a_step_in_the_current_test_has_failed()
        assert reporter.get_step_count() == 1

    def test_ignored_subject_is_titled_with_the_subject(self, bus):
        class LeaveReview:
            def __str__(self):
                return "leave a review"

        reporter = EventBusInterface(bus)
        reporter.report_step_ignored_for(LeaveReview(), IgnoreStepError())

        assert bus.steps[0].description == "leave a review"
        assert bus.steps[0].result == StepResult.IGNORED
        assert not reporter.a_step_has_failed()

    def test_defaults_to_the_current_process_wide_bus(self):
        reporter = EventBusInterface()
        reporter.report_new_step_with_title("step")
        reporter.report_step_finished()
        assert get_step_event_bus().step_count == 1

        reset_step_event_bus()

        assert reporter.get_step_count() == 0

    def test_test_markers(self, bus):
        reporter = EventBusInterface(bus)

        reporter.mark_test_pending()
        reporter.update_overall_result()

        assert bus.test_result == StepResult.PENDING
        assert reporter.current_test_is_suspended()
