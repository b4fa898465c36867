"""Per-actor memory of values noted during a test."""

from typing import Any, Dict, Iterator, Optional


class Notepad:
    """
    Key/value store an actor uses to remember things.

    Values are stored as given; reading one back under a different type than
    it was stored with is the caller's problem.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Any] = {}

    def write(self, key: str, value: Any) -> None:
        """Store a value, replacing any previous entry for the key."""
        self._entries[key] = value

    def read(self, key: str, default: Optional[Any] = None) -> Any:
        """Return the stored value, or the default for a missing key."""
        return self._entries.get(key, default)

    def forget(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
