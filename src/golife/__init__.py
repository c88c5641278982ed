"""Conway's Game of Life - simulation core."""

__version__ = "0.1.0"
__author__ = "Life Game"

from .core.life_engine import LifeEngine, new_life
from .core.kernels import EdgePolicy
from .core.errors import LifeError, InvalidDimensions, OutOfBounds
from .driver.ticker import Ticker

__all__ = ['LifeEngine', 'new_life', 'EdgePolicy', 'LifeError', 'InvalidDimensions',
           'OutOfBounds', 'Ticker', '__version__']
