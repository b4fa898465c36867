"""Registry of the abilities an actor has been given."""

from typing import Dict, List, Optional, Type, TypeVar

from screenplay.core.interfaces import Ability

A = TypeVar("A", bound=Ability)


class AbilityRegistry:
    """
    Abilities keyed by their class.

    At most one ability is kept per class; registering another instance of
    the same class replaces the first.
    """

    def __init__(self) -> None:
        self._abilities: Dict[Type[Ability], Ability] = {}

    def register(self, ability: Ability) -> None:
        self._abilities[type(ability)] = ability

    def get(self, kind: Type[A]) -> Optional[A]:
        """Return the ability registered for exactly this class, if any."""
        return self._abilities.get(kind)  # type: ignore[return-value]

    def kinds(self) -> List[Type[Ability]]:
        return list(self._abilities)

    def __contains__(self, kind: object) -> bool:
        return kind in self._abilities

    def __len__(self) -> int:
        return len(self._abilities)
