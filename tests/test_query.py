"""Tests for listing filters and ordering."""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / 'scripts' / 'lib'))

from todotxt.parser import parse_task
from todotxt.query import Criteria, filter_and_sort
from todotxt.task import Task


def _tasks(*lines):
    return [parse_task(line) for line in lines]


def _indices(pairs):
    return [i for i, _ in pairs]


def test_hides_completed_by_default():
    tasks = _tasks(
        '(A) 2023-01-01 buy milk +grocery @store',
        'x 2023-01-05 2023-01-01 mail letter',
    )
    result = filter_and_sort(tasks, Criteria(include_completed=False))
    assert result == [(0, tasks[0])]


def test_default_criteria_hide_completed():
    tasks = _tasks('x done', 'open')
    assert _indices(filter_and_sort(tasks)) == [1]


def test_include_completed_sorts_them_last():
    tasks = _tasks('x (A) done early', '(Z) open late', 'open no priority')
    result = filter_and_sort(tasks, Criteria(include_completed=True))
    assert _indices(result) == [2, 1, 0]


def test_substring_filter_matches_any():
    tasks = _tasks('buy milk', 'call bob', 'walk dog', 'buy bread')
    result = filter_and_sort(tasks, Criteria(substrings=('milk', 'dog')))
    assert _indices(result) == [0, 2]


def test_substring_filter_is_literal_and_case_sensitive():
    tasks = _tasks('Buy milk', 'buy.bread')
    assert _indices(filter_and_sort(tasks, Criteria(substrings=('buy',)))) == [1]
    assert _indices(filter_and_sort(tasks, Criteria(substrings=('y.b',)))) == [1]


def test_substring_filter_respects_completion():
    tasks = _tasks('x buy milk', 'buy bread')
    assert _indices(filter_and_sort(tasks, Criteria(substrings=('buy',)))) == [1]


def test_unprioritized_before_prioritized():
    tasks = _tasks('(B) second letter', 'no priority', '(A) first letter')
    assert _indices(filter_and_sort(tasks)) == [1, 2, 0]


def test_missing_creation_date_before_dated():
    tasks = _tasks('2023-02-01 newer', '2023-01-01 older', 'undated')
    assert _indices(filter_and_sort(tasks)) == [2, 1, 0]


def test_full_key_precedence():
    tasks = [
        Task('c', completion=True, completion_date=date(2023, 1, 1)),
        Task('b2', priority='B', creation_date=date(2023, 1, 2)),
        Task('b1', priority='B', creation_date=date(2023, 1, 1)),
        Task('a'),
        Task('b0', priority='B'),
    ]
    result = filter_and_sort(tasks, Criteria(include_completed=True))
    assert [t.description for _, t in result] == ['a', 'b0', 'b1', 'b2', 'c']
    assert _indices(result) == [3, 4, 2, 1, 0]


def test_identical_keys_keep_original_order():
    tasks = [
        Task('first', priority='A', creation_date=date(2023, 1, 1)),
        Task('other', priority='C'),
        Task('second', priority='A', creation_date=date(2023, 1, 1)),
        Task('third', priority='A', creation_date=date(2023, 1, 1)),
    ]
    result = filter_and_sort(tasks)
    assert [t.description for _, t in result] == ['other', 'first', 'second', 'third']
    assert _indices(result) == [1, 0, 2, 3]


def test_empty_collection():
    assert filter_and_sort([]) == []


def test_criteria_matches():
    criteria = Criteria(include_completed=True, substrings=('milk',))
    assert criteria.matches(Task('buy milk', completion=True))
    assert not criteria.matches(Task('buy bread'))
