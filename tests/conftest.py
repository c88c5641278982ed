"""Shared pytest fixtures and helpers for golife tests.

GPU tests require CuPy and a CUDA device. They are skipped automatically
when either is missing.
"""

import numpy as np
import pytest

from golife import LifeEngine

# ---------------------------------------------------------------------------
#  Skip helpers
# ---------------------------------------------------------------------------

def _has_cuda():
    try:
        import cupy
        return cupy.cuda.runtime.getDeviceCount() > 0
    except Exception:
        return False


requires_cupy = pytest.mark.skipif(not _has_cuda(), reason="CuPy with a CUDA device is not available")


# ---------------------------------------------------------------------------
#  Patterns
# ---------------------------------------------------------------------------

VERTICAL_BLINKER = [
    '.....',
    '..O..',
    '..O..',
    '..O..',
    '.....',
]

HORIZONTAL_BLINKER = [
    '.....',
    '.....',
    '.OOO.',
    '.....',
    '.....',
]


def grid(rows):
    """Row strings to a boolean array, for comparing against snapshots."""
    return np.array([[c == 'O' for c in row] for row in rows], dtype=bool)


@pytest.fixture(params=['toroidal', 'bounded'])
def edge_policy(request):
    return request.param


@pytest.fixture
def blinker(edge_policy):
    return LifeEngine.from_pattern(VERTICAL_BLINKER, edge_policy=edge_policy)
