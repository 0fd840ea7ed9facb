"""Conway's Game of Life on a bounded grid, with a pygame visualizer."""

__version__ = "0.1.0"
