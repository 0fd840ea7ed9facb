"""Renderers package for Game of Life visualizer."""

from life_visualizer.renderers.pygame_grid import PygameGridRenderer, RenderResult
from life_visualizer.renderers.stats_panel import StatsPanel

__all__ = ["PygameGridRenderer", "RenderResult", "StatsPanel"]
