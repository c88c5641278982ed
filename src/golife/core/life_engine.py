"""Conway's Game of Life engine with double-buffered NumPy or CuPy grids."""
import logging
import numbers
from typing import Optional

import numpy as np

from .errors import InvalidDimensions, OutOfBounds
from .kernels import EdgePolicy, birth_survive_tables, next_generation
from .patterns import to_grid
from ..utils.config import Config

LOG = logging.getLogger(__name__)

BACKENDS = ('numpy', 'cupy')


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _check_dimensions(cols, rows) -> None:
    if not (_is_int(cols) and _is_int(rows)) or cols <= 0 or rows <= 0:
        raise InvalidDimensions(f"Grid dimensions must be positive integers, got cols={cols!r}, rows={rows!r}")


def load_backend(name: str):
    """Return the array module for a backend name.

    Raises:
        ValueError: unknown backend name
        RuntimeError: CuPy requested but unusable
    """
    if name == 'numpy':
        return np
    if name != 'cupy':
        raise ValueError(f"Unknown backend {name!r}; choose from {', '.join(BACKENDS)}")

    try:
        import cupy as cp
        device_count = cp.cuda.runtime.getDeviceCount()
        if device_count == 0:
            raise RuntimeError("No CUDA devices found")
        device_props = cp.cuda.runtime.getDeviceProperties(0)
        LOG.info(f"Using CUDA device: {device_props['name'].decode()}")
    except Exception as e:
        LOG.error(f"CUDA initialization failed: {e}")
        raise RuntimeError(f"CUDA initialization failed: {e}. Install the 'gpu' extra and "
                           f"ensure an NVIDIA GPU with CUDA support is available.") from e
    return cp


class LifeEngine:
    """A fixed-size grid of binary cells advanced under Conway's rules (B3/S23).

    The engine keeps two buffers. :meth:`step` reads the current one, writes
    the next one and then swaps, so :meth:`alive` only ever sees a fully
    computed generation.
    """

    def __init__(self, cols: int = Config.DEFAULT_FIELD_WIDTH,
                 rows: int = Config.DEFAULT_FIELD_HEIGHT,
                 seed: Optional[int] = None,
                 density: float = Config.INITIAL_DENSITY,
                 edge_policy=Config.DEFAULT_EDGE_POLICY,
                 backend: str = Config.DEFAULT_BACKEND):
        """Initialize an engine with a pseudo-random field.

        Args:
            cols: Field width in cells
            rows: Field height in cells
            seed: Random seed; None draws fresh entropy from the OS
            density: Probability of each cell starting alive (0.0 to 1.0)
            edge_policy: EdgePolicy or its name ("toroidal", "bounded")
            backend: "numpy" or "cupy"
        """
        _check_dimensions(cols, rows)
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"Density must be between 0 and 1, got {density!r}")

        rng = np.random.default_rng(seed)
        self._init(rng.random((rows, cols)) < density, edge_policy, backend)
        LOG.info(f"Seeded {cols}x{rows} field (seed={seed}, density={density}): "
                 f"population={self.population}")

    @classmethod
    def from_pattern(cls, pattern, edge_policy=Config.DEFAULT_EDGE_POLICY,
                     backend: str = Config.DEFAULT_BACKEND) -> 'LifeEngine':
        """Create an engine whose initial field is ``pattern``.

        Args:
            pattern: 2D array, nested sequences or row strings (see ``patterns.to_grid``)
            edge_policy: EdgePolicy or its name
            backend: "numpy" or "cupy"
        """
        grid = to_grid(pattern)
        engine = cls.__new__(cls)
        engine._init(grid, edge_policy, backend)
        LOG.info(f"Loaded {engine.cols}x{engine.rows} pattern: population={engine.population}")
        return engine

    def _init(self, grid: np.ndarray, edge_policy, backend: str) -> None:
        self._edge_policy = EdgePolicy.parse(edge_policy)
        self._backend = backend
        self.xp = load_backend(backend)
        self._rows, self._cols = grid.shape
        self.generation = 0

        self._tables = tuple(self.xp.asarray(t) for t in birth_survive_tables())
        self._initial = grid.copy()

        # Double buffer for simulation
        self.current_buffer = 0
        self.buffers = [
            self.xp.array(grid, dtype=bool),
            self.xp.zeros((self._rows, self._cols), dtype=bool)
        ]

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def edge_policy(self) -> EdgePolicy:
        return self._edge_policy

    @property
    def backend(self) -> str:
        return self._backend

    @property
    def current_field(self):
        """Current field buffer on the engine's backend."""
        return self.buffers[self.current_buffer]

    @property
    def population(self) -> int:
        """Number of live cells in the current generation."""
        return int(self.xp.count_nonzero(self.current_field))

    def step(self, steps: int = 1) -> None:
        """Advance simulation by the given number of generations.

        Args:
            steps: Number of generations to compute (0 is a no-op)
        """
        if not _is_int(steps) or steps < 0:
            raise ValueError(f"Steps must be a non-negative integer, got {steps!r}")

        for _ in range(steps):
            current = self.buffers[self.current_buffer]
            next_buffer = self.buffers[1 - self.current_buffer]

            next_generation(current, next_buffer, self._edge_policy, self.xp, self._tables)

            # Swap buffers
            self.current_buffer = 1 - self.current_buffer
            self.generation += 1

            if LOG.isEnabledFor(logging.DEBUG):
                LOG.debug(f"Step {self.generation}: population={self.population}")

    def _check_coordinate(self, x, y) -> None:
        if not (_is_int(x) and _is_int(y)) or not (0 <= x < self._cols and 0 <= y < self._rows):
            raise OutOfBounds(x, y, self._cols, self._rows)

    def alive(self, x: int, y: int) -> bool:
        """Return whether the cell at (x, y) is alive in the current generation.

        Raises:
            OutOfBounds: x not in [0, cols) or y not in [0, rows)
        """
        self._check_coordinate(x, y)
        return bool(self.current_field[y, x])

    def set_alive(self, x: int, y: int, value: bool = True) -> None:
        """Set the state of a single cell in the current generation."""
        self._check_coordinate(x, y)
        self.current_field[y, x] = bool(value)

    def snapshot(self) -> np.ndarray:
        """Get a copy of the current field as a (rows, cols) boolean NumPy array."""
        if self.xp is np:
            return self.current_field.copy()
        return self.xp.asnumpy(self.current_field)

    def set_field(self, field) -> None:
        """Replace the current field.

        Args:
            field: Pattern with exactly (rows, cols) cells
        """
        grid = to_grid(field)
        if grid.shape != (self._rows, self._cols):
            raise InvalidDimensions(f"Field shape {grid.shape} doesn't match grid size ({self._rows}, {self._cols})")
        self.buffers[self.current_buffer][...] = self.xp.asarray(grid)

    def clear(self) -> None:
        """Kill every cell of the current generation."""
        self.current_field.fill(False)

    def reset(self) -> None:
        """Restore the initial field and rewind the generation counter."""
        self.current_buffer = 0
        self.buffers[0][...] = self.xp.asarray(self._initial)
        self.buffers[1].fill(False)
        self.generation = 0
        LOG.info(f"Reset to initial field: population={self.population}")

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(cols={self._cols}, rows={self._rows}, "
                f"edge_policy={self._edge_policy.name}, generation={self.generation})")


def new_life(cols: int, rows: int, seed: Optional[int] = None, pattern=None, **kwargs) -> LifeEngine:
    """Construct a ``cols`` x ``rows`` engine.

    With ``pattern`` the field is taken from it and its shape must match;
    otherwise the field is random, reproducible when ``seed`` is given.
    Extra keyword arguments go to :class:`LifeEngine`.
    """
    _check_dimensions(cols, rows)
    if pattern is None:
        return LifeEngine(cols, rows, seed=seed, **kwargs)

    grid = to_grid(pattern)
    if grid.shape != (rows, cols):
        raise InvalidDimensions(f"Pattern shape {grid.shape} doesn't match grid size ({rows}, {cols})")
    kwargs.pop('density', None)
    return LifeEngine.from_pattern(grid, **kwargs)

