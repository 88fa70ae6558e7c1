"""Filtering and ordering for task listings."""

from dataclasses import dataclass
from typing import Iterable

from .task import Task


@dataclass(frozen=True)
class Criteria:
    """Which tasks a listing shows.

    Completed tasks are hidden unless include_completed is set. When
    substrings is non-empty a task must contain at least one of them.
    """
    include_completed: bool = False
    substrings: tuple[str, ...] = ()

    def matches(self, task: Task) -> bool:
        if task.completion and not self.include_completed:
            return False
        if self.substrings:
            return any(s in task.description for s in self.substrings)
        return True


def _sort_key(item: tuple[int, Task]):
    index, task = item
    # None sorts before any value: (False, ...) < (True, ...)
    return (
        task.completion,
        (task.priority is not None, task.priority or ''),
        (task.creation_date is not None, task.creation_date.toordinal() if task.creation_date else 0),
        index,
    )


def filter_and_sort(tasks: Iterable[Task], criteria: Criteria | None = None) -> list[tuple[int, Task]]:
    """Return (index, task) pairs that match criteria, in display order.

    Order: open before completed, then priority (unset first, then A-Z),
    then creation date (unset first, then oldest), then original index.
    """
    criteria = criteria or Criteria()
    selected = [(i, task) for i, task in enumerate(tasks) if criteria.matches(task)]
    return sorted(selected, key=_sort_key)
