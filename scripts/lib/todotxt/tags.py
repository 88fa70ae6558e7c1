"""Tag patterns shared by tag extraction and highlighting.

Formats:
- +project   -> project tag
- @context   -> context tag
- key:value  -> metadata token
"""

import re

PROJECT_PATTERN = re.compile(r'\+(?P<tag>\S+)')
CONTEXT_PATTERN = re.compile(r'@(?P<tag>\S+)')
METADATA_PATTERN = re.compile(r'(?P<key>\S+):(?P<value>\S+)')


def extract_projects(description: str) -> tuple[str, ...]:
    """Return +project tags in order of appearance."""
    return tuple(m.group('tag') for m in PROJECT_PATTERN.finditer(description))


def extract_contexts(description: str) -> tuple[str, ...]:
    """Return @context tags in order of appearance."""
    return tuple(m.group('tag') for m in CONTEXT_PATTERN.finditer(description))


def extract_metadata(description: str) -> dict[str, str]:
    """Return key:value tokens as a dict; a repeated key keeps its last value."""
    return {m.group('key'): m.group('value') for m in METADATA_PATTERN.finditer(description)}
