"""
Core interfaces and abstract base classes for the screenplay engine.
"""

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor

ANSWER = TypeVar("ANSWER")


class Performable(ABC):
    """A task or interaction an actor can perform."""

    #: Set to True on tasks whose behaviour is not written yet.
    pending: bool = False

    @abstractmethod
    def perform_as(self, actor: "Actor") -> None:
        """
        Carry out the task on behalf of the actor.

        Args:
            actor: The actor performing the task
        """
        pass

    def is_pending(self) -> bool:
        """Whether a "step pending" notification precedes execution."""
        return self.pending

    def __str__(self) -> str:
        return _humanize(type(self).__name__)


class Consequence(ABC):
    """An assertion-like check evaluated for an actor."""

    @abstractmethod
    def evaluate_for(self, actor: "Actor") -> None:
        """
        Check the consequence, raising when it does not hold.

        Args:
            actor: The actor the consequence is evaluated for
        """
        pass

    def __str__(self) -> str:
        return _humanize(type(self).__name__)


class Question(ABC, Generic[ANSWER]):
    """A read-only query answered from the actor's point of view."""

    @abstractmethod
    def answered_by(self, actor: "Actor") -> ANSWER:
        """Return the answer for the given actor."""
        pass


class Ability(ABC):
    """Something an actor can do, such as browse the web."""

    _actor: Optional["Actor"] = None

    def as_actor(self, actor: "Actor") -> "Ability":
        """Remember the actor this ability was given to."""
        self._actor = actor
        return self

    @property
    def actor(self) -> Optional["Actor"]:
        return self._actor


class StepReporter(ABC):
    """Narrow interface the performance engine uses to report steps."""

    @abstractmethod
    def report_new_step_with_title(self, title: str) -> None:
        pass

    @abstractmethod
    def report_step_finished(self) -> None:
        pass

    @abstractmethod
    def report_step_ignored(self) -> None:
        pass

    @abstractmethod
    def report_step_ignored_for(self, subject: Any, error: BaseException) -> None:
        pass

    @abstractmethod
    def report_step_pending(self) -> None:
        pass

    @abstractmethod
    def report_step_failure_for(self, subject: Any, error: BaseException) -> None:
        pass

    @abstractmethod
    def merge_previous_step(self) -> None:
        pass

    @abstractmethod
    def mark_test_skipped(self) -> None:
        pass

    @abstractmethod
    def mark_test_pending(self) -> None:
        pass

    @abstractmethod
    def update_overall_result(self) -> None:
        pass

    @abstractmethod
    def get_step_count(self) -> int:
        pass

    @abstractmethod
    def a_step_has_failed(self) -> bool:
        pass

    @abstractmethod
    def current_test_is_suspended(self) -> bool:
        pass

    @abstractmethod
    def a_step_in_the_current_test_has_failed(self) -> bool:
        pass


class Page(ABC):
    """A page object owning the driver that element proxies are built for."""

    @abstractmethod
    def get_driver(self) -> Any:
        pass

    def get_implicit_wait_timeout_ms(self) -> Optional[int]:
        """Implicit wait in milliseconds, None to use the configured default."""
        return None

    def get_wait_for_timeout_ms(self) -> Optional[int]:
        """Wait-for timeout in milliseconds, None to use the configured default."""
        return None


_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z]|\d|\b|_)|[A-Z]?[a-z]+|[A-Z]+|\d+")


def _humanize(class_name: str) -> str:
    # Runs of capitals stay together: HTTPRequest -> "http request"
    words = _WORD.findall(class_name)
    return " ".join(word.lower() for word in words) or class_name
