#!/usr/bin/env python3
"""
todo.txt manager CLI.

Usage:
    todo.py [-C DIR] init
    todo.py [-C DIR] path
    todo.py [-C DIR] add ["description"] [-A|-B|-C|-D] [--priority X]
    todo.py [-C DIR] list [--all] [--index] [--filter TEXT ...]
    todo.py [-C DIR] done [INDEX ...]        (indices from stdin if omitted)

`todo.py list --index | grep milk | todo.py done` completes matching tasks.
"""

import argparse
import logging
import re
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent / "lib"))
from todofile import find_todo_file, init_todo_dir
from todotxt.errors import InvalidTaskError, TodoError
from todotxt.formatter import format_task
from todotxt.query import Criteria, filter_and_sort
from todotxt.store import append_task, load_tasks, save_tasks
from todotxt.task import Task, normalize_priority

logger = logging.getLogger(__name__)

INDEX_INPUT_RE = re.compile(r'^\s*(\d+):')
SHORT_PRIORITIES = ('A', 'B', 'C', 'D')


def _colorize() -> bool:
    return sys.stdout.isatty()


def cmd_init(args):
    """Create .todo/todo.txt in the working directory."""
    todo_file = init_todo_dir(args.dir)
    print(f"Initialized {todo_file}")


def cmd_path(args):
    """Print the path of the todo file in use."""
    print(find_todo_file(args.dir))


def _priority_from_args(args) -> str | None:
    if args.priority:
        return normalize_priority(args.priority)
    for letter in SHORT_PRIORITIES:
        if getattr(args, f'priority_{letter.lower()}', False):
            return letter
    return None


def _prompt_task() -> Task:
    """Ask for priority and description on the terminal."""
    try:
        while True:
            raw = input("Priority (A-Z, blank for none): ").strip()
            try:
                priority = normalize_priority(raw)
                break
            except InvalidTaskError as e:
                print(e)
        description = ''
        while not description:
            description = input("Description: ").strip()
    except EOFError:
        raise InvalidTaskError("no task description given") from None
    return Task(description, priority=priority, creation_date=date.today())


def add_task(args):
    """Append a new task, created today."""
    if args.description:
        task = Task(
            args.description,
            priority=_priority_from_args(args),
            creation_date=date.today(),
        )
    else:
        task = _prompt_task()

    append_task(find_todo_file(args.dir), task)
    print("Added task:")
    print(format_task(task, colorize=_colorize()))


def list_tasks(args):
    """List tasks, open first, sorted by priority and creation date."""
    tasks = load_tasks(find_todo_file(args.dir))
    criteria = Criteria(include_completed=args.all, substrings=tuple(args.filter or ()))
    colorize = _colorize()
    width = len(str(max(len(tasks) - 1, 0)))

    for index, task in filter_and_sort(tasks, criteria):
        line = format_task(task, colorize=colorize, align=True)
        if args.index:
            line = f"{index:0{width}d}: {line}"
        print(line)


def _read_indices_from_stdin() -> list[str]:
    """Collect indices from `NN: ...` lines as printed by `list --index`."""
    inputs = []
    for line in sys.stdin:
        line = line.rstrip('\n')
        match = INDEX_INPUT_RE.match(line)
        if not match:
            logger.warning(f"invalid input from stdin: '{line}'")
            continue
        inputs.append(match.group(1))
    return inputs


def done_task(args):
    """Mark tasks complete by index, then rewrite the todo file."""
    todo_file = find_todo_file(args.dir)
    tasks = load_tasks(todo_file)
    inputs = args.indices or _read_indices_from_stdin()
    today = date.today()

    for raw in inputs:
        try:
            index = int(raw)
        except ValueError:
            logger.warning(f"'{raw}' is not a number")
            continue
        if not 0 <= index < len(tasks):
            logger.warning(f"index '{index}' is out of range")
            continue
        task = tasks[index]
        task.mark_complete(today)
        print(format_task(task, colorize=_colorize(), align=True))

    save_tasks(todo_file, tasks)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='todo.txt manager')
    parser.add_argument('-C', dest='dir', default='.', help='Directory to look for the todo file from')

    subparsers = parser.add_subparsers(dest='command')

    init_parser = subparsers.add_parser('init', help='Create .todo/todo.txt here')
    init_parser.set_defaults(func=cmd_init)

    path_parser = subparsers.add_parser('path', help='Print path to the todo file')
    path_parser.set_defaults(func=cmd_path)

    add_parser = subparsers.add_parser('add', help='Add a task')
    add_parser.add_argument('description', nargs='?', default='', help='Task description (prompted if omitted)')
    for letter in SHORT_PRIORITIES:
        add_parser.add_argument(
            f'-{letter}',
            dest=f'priority_{letter.lower()}',
            action='store_true',
            help=f'Priority {letter}',
        )
    add_parser.add_argument('--priority', help='Priority letter A-Z')
    add_parser.set_defaults(func=add_task)

    list_parser = subparsers.add_parser('list', help='List tasks')
    list_parser.add_argument('--filter', action='append', help='Only tasks containing TEXT (repeatable)')
    list_parser.add_argument('-i', '--index', action='store_true', help='Print tasks with index number')
    list_parser.add_argument('-A', '--all', action='store_true', help='Include completed tasks')
    list_parser.set_defaults(func=list_tasks)

    done_parser = subparsers.add_parser('done', help='Mark tasks as done')
    done_parser.add_argument('indices', nargs='*', help='Task indices (read from stdin if omitted)')
    done_parser.set_defaults(func=done_task)

    return parser


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    try:
        args.func(args)
    except (TodoError, OSError) as e:
        logger.error(f"{e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
