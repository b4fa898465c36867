"""
The actor: who performs tasks and checks consequences in a test.
"""

from typing import Any, Optional, Type, TypeVar, Union, overload

from screenplay.actors.abilities import AbilityRegistry
from screenplay.actors.notepad import Notepad
from screenplay.core.interfaces import ANSWER, Ability, Consequence, Performable, Question
from screenplay.error_handling.exceptions import NoAbilityError
from screenplay.performance.engine import PerformanceEngine
from screenplay.performance.task_tally import PerformedTaskTally

A = TypeVar("A", bound=Ability)


class Actor:
    """
    A named participant in a test.

    Actors are given abilities, perform tasks, check consequences and keep
    notes. An actor owns no external resources and needs no teardown.
    """

    def __init__(self, name: str, engine: Optional[PerformanceEngine] = None) -> None:
        """
        Create an actor.

        Args:
            name: Name of the actor, used in reports and events
            engine: Performance engine (defaults to one reporting to the
                process-wide buses)
        """
        self._name = name
        self._notepad = Notepad()
        self._abilities = AbilityRegistry()
        self._engine = engine or PerformanceEngine()

    @classmethod
    def named(cls, name: str) -> "Actor":
        return cls(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def notepad(self) -> Notepad:
        return self._notepad

    @property
    def task_tally(self) -> PerformedTaskTally:
        return self._engine.task_tally

    @property
    def is_performing(self) -> bool:
        return self._engine.depth > 0

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Actor({self._name!r})"

    # Abilities

    def who_can(self, ability: Ability) -> "Actor":
        """Give the actor an ability, replacing one of the same class."""
        if not isinstance(ability, Ability):
            raise TypeError(f"Expected an Ability, got {type(ability).__name__}")
        ability.as_actor(self)
        self._abilities.register(ability)
        return self

    @overload
    def can(self, ability: Ability) -> "Actor": ...

    @overload
    def can(self, *consequences: Consequence) -> None: ...

    def can(self, *items: Any) -> Optional["Actor"]:
        """
        Give the actor an ability, or check consequences.

        ``actor.can(BrowseTheWeb(driver))`` registers the ability and
        returns the actor; ``actor.can(consequence, ...)`` is ``should``.
        """
        if len(items) == 1 and isinstance(items[0], Ability):
            return self.who_can(items[0])
        self.should(*items)
        return None

    def ability_to(self, kind: Type[A]) -> Optional[A]:
        """Return the ability registered for this class, or None."""
        return self._abilities.get(kind)

    def uses_ability_to(self, kind: Type[A]) -> A:
        """Like ``ability_to`` but raises NoAbilityError when it is missing."""
        ability = self._abilities.get(kind)
        if ability is None:
            raise NoAbilityError(self._name, kind)
        return ability

    # Performances

    def attempts_to(self, *tasks: Performable) -> None:
        self._engine.attempts_to(self, tasks)

    def has(self, *tasks: Performable) -> None:
        self.attempts_to(*tasks)

    def should(self, *consequences: Consequence) -> None:
        self._engine.should(self, consequences)

    # Questions and notes

    def asks_for(self, question: Question[ANSWER]) -> ANSWER:
        return question.answered_by(self)

    def remember(self, key: str, value: Union[Question[Any], Any]) -> None:
        """
        Note a value under a key.

        A Question is answered right away and its answer stored, so a later
        ``recall`` returns the answer as it was at this point.
        """
        if isinstance(value, Question):
            value = self.asks_for(value)
        self._notepad.write(key, value)

    def recall(self, key: str) -> Any:
        """Return the value noted under the key, or None."""
        return self._notepad.read(key)

    def saw_as_the(self, key: str) -> Any:
        return self.recall(key)

    def gave_as_the(self, key: str) -> Any:
        return self.recall(key)
