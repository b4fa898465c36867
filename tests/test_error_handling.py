"""
Unit tests for screenplay exceptions and failure classification.
"""

import unittest
from datetime import datetime

import pytest

from screenplay.core.types import FailureKind
from screenplay.error_handling import (
    AssumptionFailure,
    IgnoreStepError,
    NoAbilityError,
    NoSuitableConstructorError,
    PendingStepError,
    ScreenplayError,
    classify_failure,
    is_assumption_failure,
    is_pending_or_ignored,
)


class TestScreenplayError:
    """Test base exception class."""

    def test_basic_creation(self):
        error = ScreenplayError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.error_code == "ScreenplayError"
        assert error.details == {}
        assert error.cause is None
        assert isinstance(error.timestamp, datetime)

    def test_to_dict(self):
        cause = ValueError("root")
        error = ScreenplayError("Wrapped", error_code="SP001", details={"k": "v"}, cause=cause)

        result = error.to_dict()
        assert result["error_type"] == "ScreenplayError"
        assert result["error_code"] == "SP001"
        assert result["details"] == {"k": "v"}
        assert result["cause"] == "root"


class TestSpecificErrors:

    def test_default_messages(self):
        assert IgnoreStepError().message == "Step ignored"
        assert PendingStepError().message == "Step not implemented yet"

    def test_assumption_details(self):
        error = AssumptionFailure("No stock", assumption="stock > 0")
        assert error.details["assumption"] == "stock > 0"

    def test_no_ability_error(self):
        class BrowseTheWeb:
            pass

        error = NoAbilityError("Alice", BrowseTheWeb)
        assert error.details == {"actor_name": "Alice", "ability_kind": "BrowseTheWeb"}

    def test_no_suitable_constructor_names_the_class(self):
        class SearchBox:
            pass

        error = NoSuitableConstructorError(SearchBox)
        assert "SearchBox(WebDriver, ElementLocator, long, long)" in error.message
        assert "SearchBox(WebDriver, ElementLocator, WebElement, long, long)" in error.message


class TestClassifyFailure:
    """Tests for mapping errors to failure kinds."""

    @pytest.mark.parametrize(
        "error, kind",
        [
            (IgnoreStepError(), FailureKind.IGNORABLE),
            (PendingStepError(), FailureKind.PENDING),
            (AssumptionFailure("offline"), FailureKind.ASSUMPTION_FAILURE),
            (unittest.SkipTest("no db"), FailureKind.ASSUMPTION_FAILURE),
            (AssertionError("wrong total"), FailureKind.FATAL),
            (RuntimeError("boom"), FailureKind.FATAL),
        ],
    )
    def test_classification(self, error, kind):
        assert classify_failure(error) is kind

    def test_name_or_message_does_not_matter(self):
        """Only the error type counts, not what it is called or says."""

        class AssumptionViolatedLookalike(Exception):
            pass

        assert classify_failure(AssumptionViolatedLookalike("Assumption failed")) is FailureKind.FATAL

    def test_subclasses_are_classified_by_base(self):
        class MissingFixture(AssumptionFailure):
            pass

        assert is_assumption_failure(MissingFixture("no fixture"))

    def test_pending_or_ignored(self):
        assert is_pending_or_ignored(IgnoreStepError())
        assert is_pending_or_ignored(PendingStepError())
        assert not is_pending_or_ignored(ValueError())
