"""Core module for the Game of Life simulation."""
from .errors import LifeError, InvalidDimensions, OutOfBounds
from .kernels import EdgePolicy
from .life_engine import LifeEngine, new_life
from .patterns import PATTERNS, get_pattern, place

__all__ = ['LifeEngine', 'new_life', 'EdgePolicy', 'LifeError', 'InvalidDimensions',
           'OutOfBounds', 'PATTERNS', 'get_pattern', 'place']
