"""todo.txt line parser.

Line grammar (each group optional except the description):

    x (A) 2024-01-05 2024-01-01 description with +project @context key:value

A lone date belongs to ``completion_date`` on a completed task and to
``creation_date`` otherwise. With two dates the first is always the
completion date and the second the creation date.
"""

import re
from datetime import date

from .errors import InvalidTaskError, TaskParseError
from .task import Task

TASK_LINE_RE = re.compile(
    r'^\s*'
    r'(?:(?P<completion>x)\s+)?'
    r'(?:\((?P<priority>[A-Z])\)\s+)?'
    r'(?:(?P<first_date>[0-9]{4}-[0-9]{2}-[0-9]{2})\s+)?'
    r'(?:(?P<second_date>[0-9]{4}-[0-9]{2}-[0-9]{2})\s+)?'
    r'(?P<description>\S.*)$'
)


def _parse_date(token: str, line: str) -> date:
    try:
        return date.fromisoformat(token)
    except ValueError:
        # Shaped like a date but not on the calendar (e.g. 2020-13-99).
        raise TaskParseError(line) from None


def parse_task(line: str) -> Task | None:
    """Parse one line (without its terminator) into a Task.

    Returns None for blank lines. Raises TaskParseError for any other line
    that does not match the grammar.
    """
    if not line.strip():
        return None

    match = TASK_LINE_RE.match(line)
    if not match:
        raise TaskParseError(line)

    completion = match.group('completion') == 'x'
    first = match.group('first_date')
    second = match.group('second_date')

    completion_date = None
    creation_date = None
    if first and second:
        completion_date = _parse_date(first, line)
        creation_date = _parse_date(second, line)
    elif first:
        if completion:
            completion_date = _parse_date(first, line)
        else:
            creation_date = _parse_date(first, line)

    try:
        return Task(
            match.group('description'),
            completion=completion,
            priority=match.group('priority'),
            creation_date=creation_date,
            completion_date=completion_date,
        )
    except InvalidTaskError:
        # e.g. a stray carriage return inside the line
        raise TaskParseError(line) from None
