"""Headless drivers for the Game of Life engine."""
from .ticker import Ticker

__all__ = ['Ticker']
