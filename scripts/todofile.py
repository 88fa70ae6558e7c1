#!/usr/bin/env python3
"""
Locate the todo.txt file.

Configuration via environment variables:
- TODO_FILE: Path to the todo file (skips directory discovery)
- TODO_DIR_NAME: Name of the directory holding todo.txt (default: .todo)
"""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "lib"))
from todotxt.errors import TodoError, TodoFileNotFound

TODO_FILENAME = "todo.txt"
GITIGNORE_CONTENT = "*\n"


def get_todo_dir_name() -> str:
    """Return the discovery directory name (TODO_DIR_NAME or '.todo')."""
    return os.getenv("TODO_DIR_NAME") or ".todo"


def find_todo_file(start: Path | str = ".") -> Path:
    """Find the todo file for a working directory.

    TODO_FILE wins if set. Otherwise walk from start up to the filesystem
    root and return <dir>/.todo/todo.txt for the first directory that has a
    .todo entry.

    Raises:
        TodoError: a .todo entry exists but is not a directory.
        TodoFileNotFound: no .todo directory between start and the root.
    """
    explicit = os.getenv("TODO_FILE")
    if explicit:
        return Path(explicit).expanduser()

    dir_name = get_todo_dir_name()
    current = Path(start).resolve()
    for directory in (current, *current.parents):
        candidate = directory / dir_name
        if candidate.exists():
            if not candidate.is_dir():
                raise TodoError(f"'{dir_name}' is not a directory: {candidate}")
            return candidate / TODO_FILENAME
    raise TodoFileNotFound(f"todo file not found (no '{dir_name}' directory above {current})")


def init_todo_dir(root: Path | str = ".") -> Path:
    """Create <root>/.todo/todo.txt and a .gitignore that ignores it.

    Existing files are left untouched. Returns the todo file path.
    """
    todo_dir = Path(root) / get_todo_dir_name()
    todo_dir.mkdir(parents=True, exist_ok=True)
    todo_file = todo_dir / TODO_FILENAME
    todo_file.touch(exist_ok=True)
    gitignore = todo_dir / ".gitignore"
    if not gitignore.exists():
        gitignore.write_text(GITIGNORE_CONTENT)
    return todo_file
