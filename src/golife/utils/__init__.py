"""Utility helpers for the Game of Life engine."""
from .config import Config

__all__ = ['Config']
