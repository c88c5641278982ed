"""Errors raised by the Life engine."""


class LifeError(Exception):
    """Base class for engine contract violations."""


class InvalidDimensions(LifeError, ValueError):
    """Grid dimensions or pattern shape are not usable."""


class OutOfBounds(LifeError, IndexError):
    """Coordinate lies outside the grid."""

    def __init__(self, x, y, cols: int, rows: int):
        self.x = x
        self.y = y
        self.cols = cols
        self.rows = rows
        super().__init__(f"Cell ({x}, {y}) is outside the {cols}x{rows} grid")
