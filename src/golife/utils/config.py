"""Configuration constants for the Game of Life engine."""
from dataclasses import dataclass


@dataclass
class Config:
    """Engine and driver defaults."""

    # Field settings
    DEFAULT_FIELD_WIDTH: int = 40
    DEFAULT_FIELD_HEIGHT: int = 30

    # Seeding: the mobile demo brought a quarter of the field to life
    INITIAL_DENSITY: float = 0.25

    # Simulation settings
    DEFAULT_EDGE_POLICY: str = "toroidal"
    DEFAULT_BACKEND: str = "numpy"
    DEFAULT_GENERATIONS: int = 100

    # Driver cadence, in ticks per generation
    INITIAL_RENDER_EVERY: int = 5
    MAX_RENDER_EVERY: int = 600
