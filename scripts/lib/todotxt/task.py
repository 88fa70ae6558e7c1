"""Task record for a single todo.txt line."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date

from .errors import InvalidTaskError
from .tags import extract_contexts, extract_metadata, extract_projects

PRIORITY_RE = re.compile(r'[A-Z]')


def normalize_priority(value: str | None) -> str | None:
    """Return an uppercase A-Z priority, or None when unset.

    Raises InvalidTaskError for anything that is not a single letter.
    """
    if value is None or value == '':
        return None
    priority = str(value).upper()
    if not PRIORITY_RE.fullmatch(priority):
        raise InvalidTaskError(f"invalid priority: {value!r} (expected a letter A-Z)")
    return priority


def check_description(value) -> None:
    """Reject descriptions that cannot be stored on a single todo.txt line.

    A description must start with a non-whitespace character and must not
    contain a line break (\\n or \\r).
    """
    if not isinstance(value, str) or value == '':
        raise InvalidTaskError("task description must be a non-empty string")
    if '\n' in value or '\r' in value:
        raise InvalidTaskError(f"task description must be a single line: {value!r}")
    if value[0].isspace():
        raise InvalidTaskError(f"task description must not start with whitespace: {value!r}")


@dataclass
class Task:
    """One todo.txt task.

    ``projects``, ``contexts`` and ``metadata`` are derived from
    ``description`` whenever it is assigned; they are not constructor
    arguments and do not take part in equality.
    """

    description: str
    completion: bool = False
    priority: str | None = None
    creation_date: date | None = None
    completion_date: date | None = None

    projects: tuple[str, ...] = field(init=False, repr=False, compare=False)
    contexts: tuple[str, ...] = field(init=False, repr=False, compare=False)
    metadata: dict[str, str] = field(init=False, repr=False, compare=False)

    def __setattr__(self, name, value):
        if name == 'description':
            check_description(value)
            super().__setattr__(name, value)
            super().__setattr__('projects', extract_projects(value))
            super().__setattr__('contexts', extract_contexts(value))
            super().__setattr__('metadata', extract_metadata(value))
            return
        if name == 'priority':
            value = normalize_priority(value)
        super().__setattr__(name, value)

    def mark_complete(self, today: date | None = None) -> None:
        """Flag the task done, stamping the completion date (default: today)."""
        self.completion = True
        self.completion_date = today or date.today()
