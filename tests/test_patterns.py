"""Tests for pattern parsing and placement."""

import numpy as np
import pytest

from golife import InvalidDimensions, LifeEngine
from golife.core.patterns import PATTERNS, get_pattern, pattern_names, place, to_grid


def test_row_strings():
    grid = to_grid(['O.*', '.1.'])
    assert grid.tolist() == [[True, False, True], [False, True, False]]


def test_multiline_string():
    assert to_grid('.O\nO.').tolist() == [[False, True], [True, False]]


def test_short_rows_are_padded():
    assert to_grid(['O', '.O']).tolist() == [[True, False], [False, True]]


def test_nested_sequences():
    assert to_grid([[0, 1], [1, 0]]).tolist() == [[False, True], [True, False]]


def test_array_input():
    grid = to_grid(np.array([[0, 2], [0, 0]]))
    assert grid.dtype == bool
    assert grid.tolist() == [[False, True], [False, False]]


@pytest.mark.parametrize('pattern', [
    [],
    [[]],
    [1, 0, 1],
    [[1, 0], [1]],
    ['O?'],
    np.zeros((2, 2, 2)),
])
def test_invalid_patterns(pattern):
    with pytest.raises(InvalidDimensions):
        to_grid(pattern)


def test_get_pattern():
    assert get_pattern('block').tolist() == [[True, True], [True, True]]
    with pytest.raises(ValueError):
        get_pattern('spaceship')


def test_pattern_names():
    assert pattern_names() == sorted(PATTERNS)
    assert 'glider' in pattern_names()


def test_place_centered():
    grid = place('glider', 5, 5)
    assert grid.shape == (5, 5)
    assert grid[1:4, 1:4].tolist() == to_grid(PATTERNS['glider']).tolist()
    assert grid.sum() == 5


def test_place_at_corner():
    grid = place(PATTERNS['block'], 4, 3, x=2, y=1)
    assert grid[1:3, 2:4].all()
    assert grid.sum() == 4


@pytest.mark.parametrize('cols, rows, x, y', [(1, 5, None, None), (4, 4, 3, 0), (4, 4, 0, -1)])
def test_place_does_not_fit(cols, rows, x, y):
    with pytest.raises(InvalidDimensions):
        place(PATTERNS['block'], cols, rows, x=x, y=y)


@pytest.mark.parametrize('name, period', [('blinker', 2), ('toad', 2), ('block', 1), ('beehive', 1)])
def test_builtin_oscillators(name, period):
    start = place(PATTERNS[name], 8, 8)
    engine = LifeEngine.from_pattern(start, edge_policy='bounded')
    engine.step(period)
    assert np.array_equal(engine.snapshot(), start)


def test_rows_of_characters():
    grid = to_grid([['O', '.'], ['.', 'O']])
    assert grid.tolist() == [[True, False], [False, True]]


def test_split_rows_match_row_strings():
    rows = PATTERNS['glider']
    assert to_grid([list(row) for row in rows]).tolist() == to_grid(rows).tolist()


@pytest.mark.parametrize('pattern', [
    [['O', 1], ['.', 0]],
    [['O', '.'], [1, 0]],
    [['OO', '.'], ['.', 'O']],
    [['O', '?']],
])
def test_mixed_character_rows(pattern):
    with pytest.raises(InvalidDimensions):
        to_grid(pattern)
