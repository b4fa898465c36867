"""
Shared fixtures for the screenplay test suite.
"""

from unittest.mock import Mock

import pytest

from screenplay.config.policy import reset_fail_fast_policy
from screenplay.config.settings import get_settings
from screenplay.core.interfaces import StepReporter
from screenplay.locators.element_factory import clear_element_implementations
from screenplay.performance.events import reset_event_bus
from screenplay.reporting.step_event_bus import reset_step_event_bus


@pytest.fixture(autouse=True)
def isolated_process_state(monkeypatch):
    """Give every test fresh buses, settings and fail-fast policy."""
    monkeypatch.delenv("SCREENPLAY_FAIL_FAST", raising=False)
    get_settings.cache_clear()
    reset_fail_fast_policy()
    reset_step_event_bus()
    reset_event_bus()
    clear_element_implementations()
    yield
    get_settings.cache_clear()
    reset_fail_fast_policy()
    reset_step_event_bus()
    reset_event_bus()
    clear_element_implementations()


@pytest.fixture
def reporter():
    """A step reporter mock describing a healthy, unsuspended test."""
    mock = Mock(spec=StepReporter)
    mock.get_step_count.return_value = 0
    mock.a_step_has_failed.return_value = False
    mock.current_test_is_suspended.return_value = False
    mock.a_step_in_the_current_test_has_failed.return_value = False
    return mock
