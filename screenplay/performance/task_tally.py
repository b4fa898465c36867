"""Count of the tasks attempted during a performance."""


class PerformedTaskTally:
    """Non-negative counter of attempted tasks, reset for each performance."""

    def __init__(self) -> None:
        self._count = 0

    def new_task(self) -> None:
        self._count += 1

    def reset(self) -> None:
        self._count = 0

    def restore(self, count: int) -> None:
        """Put back a count saved before a nested performance."""
        if count < 0:
            raise ValueError(f"Task count cannot be negative: {count}")
        self._count = count

    @property
    def performed_task_count(self) -> int:
        return self._count
