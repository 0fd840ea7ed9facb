"""Configuration and constants for the Game of Life visualizer."""

from dataclasses import dataclass
from typing import Tuple

# ==============================================================================
# World Constants
# ==============================================================================

WORLD_WIDTH: int = 100
WORLD_HEIGHT: int = 100

# Compass directions excluding the center, as (dx, dy)
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

# ==============================================================================
# Color Scheme
# ==============================================================================

BACKGROUND_COLOR: Tuple[int, int, int] = (255, 255, 255)
CELL_COLOR: Tuple[int, int, int] = (0, 0, 0)
STATS_PANEL_BG: Tuple[int, int, int] = (30, 30, 40)
TEXT_COLOR: Tuple[int, int, int] = (220, 220, 220)
TEXT_HIGHLIGHT_COLOR: Tuple[int, int, int] = (255, 255, 255)
BIRTH_COLOR: Tuple[int, int, int] = (80, 200, 120)
DEATH_COLOR: Tuple[int, int, int] = (255, 100, 100)

# ==============================================================================
# Layout Constants
# ==============================================================================

CELL_SIZE: int = 6  # Pixels per cell side
STATS_PANEL_WIDTH: int = 240
STATS_PANEL_MIN_HEIGHT: int = 360

# ==============================================================================
# Animation Constants
# ==============================================================================

TICK_RATE: int = 20  # Generations (and frames) per second


# ==============================================================================
# Configuration Dataclass
# ==============================================================================


@dataclass
class VisualizerConfig:
    """Configuration for the Game of Life visualizer."""

    # Grid dimensions
    grid_width: int = WORLD_WIDTH
    grid_height: int = WORLD_HEIGHT

    # Display settings
    cell_size: int = CELL_SIZE
    fps: int = TICK_RATE

    # Mode flags
    show_stats: bool = False

    @property
    def grid_pixel_width(self) -> int:
        """Width of the grid area in pixels."""
        return self.grid_width * self.cell_size

    @property
    def grid_pixel_height(self) -> int:
        """Height of the grid area in pixels."""
        return self.grid_height * self.cell_size

    @property
    def window_width(self) -> int:
        """Total window width including stats panel."""
        if self.show_stats:
            return self.grid_pixel_width + STATS_PANEL_WIDTH
        return self.grid_pixel_width

    @property
    def window_height(self) -> int:
        """Total window height."""
        if self.show_stats:
            return max(self.grid_pixel_height, STATS_PANEL_MIN_HEIGHT)
        return self.grid_pixel_height
