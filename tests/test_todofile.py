"""Tests for todo file discovery and init."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / 'scripts'))

from todofile import find_todo_file, init_todo_dir
from todotxt.errors import TodoError, TodoFileNotFound


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv('TODO_FILE', raising=False)
    monkeypatch.delenv('TODO_DIR_NAME', raising=False)


def test_todo_file_env_wins(tmp_path, monkeypatch):
    explicit = tmp_path / 'elsewhere.txt'
    monkeypatch.setenv('TODO_FILE', str(explicit))
    assert find_todo_file(tmp_path) == explicit


def test_finds_todo_dir_in_start_directory(tmp_path):
    (tmp_path / '.todo').mkdir()
    assert find_todo_file(tmp_path) == tmp_path.resolve() / '.todo' / 'todo.txt'


def test_walks_up_to_parent(tmp_path):
    (tmp_path / '.todo').mkdir()
    nested = tmp_path / 'a' / 'b' / 'c'
    nested.mkdir(parents=True)
    assert find_todo_file(nested) == tmp_path.resolve() / '.todo' / 'todo.txt'


def test_nearest_todo_dir_wins(tmp_path):
    (tmp_path / '.todo').mkdir()
    inner = tmp_path / 'project'
    (inner / '.todo').mkdir(parents=True)
    assert find_todo_file(inner / '.todo') == inner.resolve() / '.todo' / 'todo.txt'
    assert find_todo_file(inner) == inner.resolve() / '.todo' / 'todo.txt'


def test_todo_entry_that_is_a_file_is_an_error(tmp_path):
    (tmp_path / '.todo').write_text('not a directory')
    with pytest.raises(TodoError, match='not a directory'):
        find_todo_file(tmp_path)


def test_not_found(tmp_path, monkeypatch):
    monkeypatch.setenv('TODO_DIR_NAME', '.todo-missing-for-test')
    with pytest.raises(TodoFileNotFound):
        find_todo_file(tmp_path)


def test_custom_dir_name(tmp_path, monkeypatch):
    monkeypatch.setenv('TODO_DIR_NAME', '.tasks')
    (tmp_path / '.tasks').mkdir()
    assert find_todo_file(tmp_path) == tmp_path.resolve() / '.tasks' / 'todo.txt'


def test_init_creates_files(tmp_path):
    todo_file = init_todo_dir(tmp_path)
    assert todo_file == tmp_path / '.todo' / 'todo.txt'
    assert todo_file.read_text() == ''
    assert (tmp_path / '.todo' / '.gitignore').read_text() == '*\n'
    assert find_todo_file(tmp_path) == todo_file.resolve()


def test_init_keeps_existing_content(tmp_path):
    todo_file = init_todo_dir(tmp_path)
    todo_file.write_text('keep me\n')
    (tmp_path / '.todo' / '.gitignore').write_text('custom\n')
    init_todo_dir(tmp_path)
    assert todo_file.read_text() == 'keep me\n'
    assert (tmp_path / '.todo' / '.gitignore').read_text() == 'custom\n'
