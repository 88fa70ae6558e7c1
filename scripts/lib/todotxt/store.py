"""Load, save and append tasks in a todo.txt file.

A file holds one task per line, each terminated by a newline. Blank lines
are ignored; malformed lines are logged and dropped so one bad line never
loses the rest of the list.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path

from .errors import TaskParseError, TodoError, TodoFileNotFound
from .formatter import format_task
from .parser import parse_task
from .task import Task

logger = logging.getLogger(__name__)


def atomic_write(path: Path, content: str) -> None:
    """Write content via tempfile + rename so readers never see a partial file.

    An existing file keeps its permission bits.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        if path.exists():
            os.chmod(tmp_name, stat.S_IMODE(path.stat().st_mode))
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
    finally:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)


def load_tasks(path: Path) -> list[Task]:
    """Read every task from path, in file order.

    Only "\\n" ends a line; a trailing "\\r" is dropped so CRLF files load.

    Raises TodoFileNotFound if the file does not exist and TodoError if it
    is not valid UTF-8.
    """
    path = Path(path)
    if not path.exists():
        raise TodoFileNotFound(f"todo file not found: {path}")

    try:
        content = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise TodoError(f"todo file is not valid UTF-8: {path} ({e.reason} at byte {e.start})") from e

    tasks = []
    for line_number, line in enumerate(content.split('\n'), 1):
        if line.endswith('\r'):
            line = line[:-1]
        try:
            task = parse_task(line)
        except TaskParseError as e:
            logger.warning(f"wrong format at line {line_number} of '{path}': {e.line!r}")
            continue
        if task is not None:
            tasks.append(task)
    return tasks


def save_tasks(path: Path, tasks: list[Task]) -> None:
    """Replace the whole file with the given tasks in canonical form."""
    content = ''.join(format_task(task) + '\n' for task in tasks)
    atomic_write(Path(path), content)


def append_task(path: Path, task: Task) -> None:
    """Append one task without reading or rewriting existing entries.

    Only the last byte is inspected, to add a missing final newline.
    """
    line = (format_task(task) + '\n').encode('utf-8')
    with open(path, 'a+b') as f:
        if f.tell() > 0:
            f.seek(-1, os.SEEK_END)
            if f.read(1) != b'\n':
                line = b'\n' + line
        f.write(line)
