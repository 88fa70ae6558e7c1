"""Render tasks back to todo.txt lines.

Canonical output (no color, no alignment) is what gets written to disk and
parses back to an equal task. ``align`` pads missing fields so list output
lines up in columns; ``colorize`` styles the line with rich and returns it
with ANSI escape codes.
"""

from rich.console import Console
from rich.text import Text

from .tags import CONTEXT_PATTERN, METADATA_PATTERN, PROJECT_PATTERN
from .task import Task

DATE_WIDTH = len('YYYY-MM-DD')

DATE_STYLE = 'underline'
COMPLETED_STYLE = 'dim'
TAG_STYLES = (
    (PROJECT_PATTERN, 'red'),
    (CONTEXT_PATTERN, 'yellow'),
    (METADATA_PATTERN, 'green'),
)


def _fields(task: Task, align: bool) -> list[tuple[str, str | None]]:
    """Return (text, style) pairs for every field before the description."""
    fields = []

    if task.completion:
        fields.append(('x', None))
    elif align:
        fields.append((' ', None))

    if task.priority:
        fields.append((f'({task.priority})', None))
    elif align:
        fields.append((' ' * 3, None))

    for value in (task.completion_date, task.creation_date):
        if value:
            fields.append((value.isoformat(), DATE_STYLE))
        elif align:
            fields.append((' ' * DATE_WIDTH, DATE_STYLE))

    return fields


def render_task(task: Task, align: bool = False) -> Text:
    """Build the styled rich Text for a task line.

    rich drops control characters from Text, so this is for display only;
    format_task builds the canonical line from plain strings.
    """
    words = [Text(text, style=style or '') for text, style in _fields(task, align)]

    description = Text(task.description)
    for pattern, style in TAG_STYLES:
        for match in pattern.finditer(description.plain):
            description.stylize(style, match.start(), match.end())
    words.append(description)

    line = Text(' ').join(words)
    if task.completion:
        line.stylize(COMPLETED_STYLE)
    return line


def _to_ansi(text: Text) -> str:
    console = Console(
        force_terminal=True,
        color_system='standard',
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )
    with console.capture() as capture:
        console.print(text, end='')
    return capture.get()


def format_task(task: Task, colorize: bool = False, align: bool = False) -> str:
    """Serialize a task to a single line (no trailing newline)."""
    if colorize:
        return _to_ansi(render_task(task, align=align))
    words = [text for text, _ in _fields(task, align)]
    words.append(task.description)
    return ' '.join(words)
