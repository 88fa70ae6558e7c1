"""Exception types for todo.txt handling."""


class TodoError(Exception):
    """Base class for todo.txt errors."""


class TaskParseError(TodoError, ValueError):
    """A non-empty line that does not follow the todo.txt grammar.

    Non-fatal while loading a file: the line is logged and skipped.
    """

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"wrong format: {line!r}")


class InvalidTaskError(TodoError, ValueError):
    """Invalid field value supplied when building a task."""


class TodoFileNotFound(TodoError, FileNotFoundError):
    """The todo file (or the directory holding it) could not be found."""
