"""Models package for the Game of Life visualizer."""

from life_visualizer.models.cell import (
    Cell,
    Generation,
    InvalidCellError,
    is_valid_cell,
    make_generation,
    validate_cell,
)
from life_visualizer.models.life_stats import GenerationStats, LifeStats

__all__ = [
    "Cell",
    "Generation",
    "InvalidCellError",
    "is_valid_cell",
    "make_generation",
    "validate_cell",
    "GenerationStats",
    "LifeStats",
]
