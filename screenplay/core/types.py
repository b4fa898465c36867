"""
Core data models and types for the screenplay engine.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class StepResult(str, Enum):
    """Outcome of a reported step or of a whole test."""

    UNDEFINED = "undefined"
    SUCCESS = "success"
    IGNORED = "ignored"
    SKIPPED = "skipped"
    PENDING = "pending"
    FAILURE = "failure"
    ERROR = "error"

    @property
    def priority(self) -> int:
        """Severity used when combining results; higher wins."""
        return _RESULT_PRIORITY[self]

    @property
    def is_unsuccessful(self) -> bool:
        return self in (StepResult.FAILURE, StepResult.ERROR)


_RESULT_PRIORITY = {
    StepResult.UNDEFINED: 0,
    StepResult.SUCCESS: 1,
    StepResult.IGNORED: 2,
    StepResult.SKIPPED: 3,
    StepResult.PENDING: 4,
    StepResult.FAILURE: 5,
    StepResult.ERROR: 6,
}


def most_severe(results: List[StepResult]) -> StepResult:
    """Return the highest-priority result, UNDEFINED for an empty list."""
    return max(results, key=lambda r: r.priority, default=StepResult.UNDEFINED)


class FailureKind(str, Enum):
    """How the performance engine treats an error raised by an activity."""

    IGNORABLE = "ignorable"
    PENDING = "pending"
    ASSUMPTION_FAILURE = "assumption_failure"
    FATAL = "fatal"


class StepFailure(BaseModel):
    """An error attributed to a step title."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    description: str = Field(..., description="Title of the failing task or consequence")
    error: BaseException

    @property
    def result(self) -> StepResult:
        """Assertion errors are failures, anything else is an error."""
        if isinstance(self.error, AssertionError):
            return StepResult.FAILURE
        return StepResult.ERROR

    @property
    def message(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"


class StepRecord(BaseModel):
    """A step reported to the step event bus."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    step_id: UUID = Field(default_factory=uuid4)
    description: str
    result: StepResult = StepResult.UNDEFINED
    failure: Optional[StepFailure] = None
    cause: Optional[BaseException] = Field(
        None, description="Error that made the step ignored or pending"
    )
    children: List["StepRecord"] = Field(default_factory=list)
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.finished_at is None

    @property
    def overall_result(self) -> StepResult:
        """Own result combined with the results of nested steps."""
        return most_severe([self.result] + [c.overall_result for c in self.children])


class PerformanceEventType(str, Enum):
    """Notifications published around an actor's performance."""

    ACTOR_BEGAN_PERFORMANCE = "actor_began_performance"
    ACTOR_ENDED_PERFORMANCE = "actor_ended_performance"


class PerformanceEvent(BaseModel):
    """A begin/end notification for one performance."""

    event_id: UUID = Field(default_factory=uuid4)
    event_type: PerformanceEventType
    actor_name: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


StepRecord.model_rebuild()
