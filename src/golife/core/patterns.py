"""Seed patterns and conversion of user-supplied patterns into grids."""
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidDimensions

ALIVE_CHARS = frozenset('Oo*#1Xx')
DEAD_CHARS = frozenset('. _0-')

# Built-in patterns as row strings
PATTERNS: Dict[str, Tuple[str, ...]] = {
    'block': (
        'OO',
        'OO',
    ),
    'blinker': (
        'OOO',
    ),
    'glider': (
        '.O.',
        '..O',
        'OOO',
    ),
    'beehive': (
        '.OO.',
        'O..O',
        '.OO.',
    ),
    'toad': (
        '.OOO',
        'OOO.',
    ),
    'r_pentomino': (
        '.OO',
        'OO.',
        '.O.',
    ),
}


def _parse_row(row: str, y: int) -> list:
    cells = []
    for x, char in enumerate(row):
        if char in ALIVE_CHARS:
            cells.append(True)
        elif char in DEAD_CHARS:
            cells.append(False)
        else:
            raise InvalidDimensions(f"Unexpected character {char!r} at ({x}, {y}) in pattern")
    return cells


def _has_char_cells(row) -> bool:
    return isinstance(row, (list, tuple)) and any(isinstance(cell, str) for cell in row)


def _join_cells(row, y: int) -> str:
    """Collapse a row of single-character cells into a row string."""
    if isinstance(row, str):
        return row
    if not isinstance(row, (list, tuple)) or not all(isinstance(cell, str) and len(cell) == 1 for cell in row):
        raise InvalidDimensions(f"Row {y} mixes single-character cells with other values")
    return ''.join(row)


def to_grid(pattern) -> np.ndarray:
    """Convert a pattern to a 2D boolean NumPy array of shape (rows, cols).

    Accepts a 2D array (NumPy or anything with ``get()`` such as a CuPy array),
    nested sequences of truthy values, or a sequence of row strings (or rows
    of single-character strings). String rows shorter than the longest row
    are padded with dead cells.
    """
    if hasattr(pattern, 'get') and not isinstance(pattern, (dict, np.ndarray)):
        pattern = pattern.get()

    if isinstance(pattern, str):
        pattern = pattern.splitlines()

    if isinstance(pattern, np.ndarray):
        grid = pattern.astype(bool)
    else:
        rows = list(pattern)
        if any(_has_char_cells(row) for row in rows):
            rows = [_join_cells(row, y) for y, row in enumerate(rows)]

        if rows and all(isinstance(row, str) for row in rows):
            parsed = [_parse_row(row, y) for y, row in enumerate(rows)]
            width = max((len(row) for row in parsed), default=0)
            parsed = [row + [False] * (width - len(row)) for row in parsed]
            grid = np.array(parsed, dtype=bool)
        else:
            try:
                grid = np.array(rows, dtype=bool)
            except ValueError as e:
                raise InvalidDimensions(f"Pattern rows have different lengths: {e}") from e

    if grid.ndim != 2 or grid.shape[0] == 0 or grid.shape[1] == 0:
        raise InvalidDimensions(f"Pattern must be a non-empty 2D grid, got shape {grid.shape}")
    return grid


def get_pattern(name: str) -> np.ndarray:
    """Get a built-in pattern by name as a boolean grid."""
    try:
        return to_grid(PATTERNS[name])
    except KeyError:
        raise ValueError(f"Unknown pattern {name!r}; choose from {', '.join(sorted(PATTERNS))}") from None


def place(pattern, cols: int, rows: int, x: Optional[int] = None, y: Optional[int] = None) -> np.ndarray:
    """Place a pattern on an empty ``cols`` x ``rows`` grid.

    Args:
        pattern: Built-in pattern name or anything accepted by :func:`to_grid`
        cols: Target grid width
        rows: Target grid height
        x, y: Top-left corner; centered when omitted

    Returns:
        Boolean grid of shape (rows, cols)
    """
    if isinstance(pattern, str) and pattern in PATTERNS:
        stamp = get_pattern(pattern)
    else:
        stamp = to_grid(pattern)
    height, width = stamp.shape
    if width > cols or height > rows:
        raise InvalidDimensions(f"Pattern {width}x{height} does not fit a {cols}x{rows} grid")

    if x is None:
        x = (cols - width) // 2
    if y is None:
        y = (rows - height) // 2
    if not (0 <= x <= cols - width and 0 <= y <= rows - height):
        raise InvalidDimensions(f"Pattern at ({x}, {y}) does not fit a {cols}x{rows} grid")

    grid = np.zeros((rows, cols), dtype=bool)
    grid[y:y + height, x:x + width] = stamp
    return grid


def pattern_names() -> Sequence[str]:
    return sorted(PATTERNS)
