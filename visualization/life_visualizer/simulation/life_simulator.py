"""Simulator that owns the current generation and advances it each tick."""

import logging
from typing import Callable, Optional, Union

from life_visualizer.config import VisualizerConfig
from life_visualizer.models.cell import Generation
from life_visualizer.models.life_stats import GenerationStats, LifeStats
from life_visualizer.simulation.dense import DenseGenerationEngine
from life_visualizer.simulation.engine import GenerationEngine
from life_visualizer.simulation.patterns import get_pattern

log = logging.getLogger(__name__)

Engine = Union[GenerationEngine, DenseGenerationEngine]

ENGINES = {
    "sparse": GenerationEngine,
    "dense": DenseGenerationEngine,
}


def create_engine(name: str, config: VisualizerConfig) -> Engine:
    """
    Create a transition engine by name.

    Raises:
        KeyError: If the engine name is unknown.
    """
    return ENGINES[name](config.grid_width, config.grid_height)


class LifeSimulator:
    """
    Drives the Game of Life one generation per tick.

    The current generation is the only mutable state. Each step replaces it
    with a new frozenset from the engine; previous generations are never
    modified.
    """

    def __init__(self, config: VisualizerConfig, engine: Optional[Engine] = None):
        """
        Initialize the simulator with an empty world.

        Args:
            config: Visualizer configuration.
            engine: Transition engine (defaults to the sparse engine).
        """
        self.config = config
        self.engine = engine or GenerationEngine(config.grid_width, config.grid_height)
        self.cells: Generation = frozenset()
        self.stats = LifeStats()
        self.generation = 0

        # Called after every step with that step's statistics
        self._step_callback: Optional[Callable[[GenerationStats], None]] = None

    def set_step_callback(self, callback: Callable[[GenerationStats], None]) -> None:
        """
        Set a callback to be called after each generation is computed.

        Args:
            callback: Function that takes the new GenerationStats.
        """
        self._step_callback = callback

    def initialize_cells(self, cells: Generation) -> None:
        """Start over from an explicit set of live cells."""
        self.cells = frozenset(cells)
        self.generation = 0
        self.stats.reset(population=len(self.cells))

    def initialize_pattern(self, pattern: str = "default") -> None:
        """
        Start over from a named pattern.

        Args:
            pattern: Pattern name (see patterns.PATTERN_NAMES).
        """
        self.initialize_cells(
            get_pattern(pattern, self.config.grid_width, self.config.grid_height)
        )
        log.info("Initialized pattern %r with %d live cells", pattern, len(self.cells))

    def step(self) -> GenerationStats:
        """Compute one generation and record its statistics."""
        previous = self.cells
        self.cells = self.engine.next_generation(previous)
        self.generation += 1

        stats = GenerationStats.between(self.generation, previous, self.cells)
        self.stats.record(stats)
        log.debug(
            "Generation %d: population=%d births=%d deaths=%d",
            stats.generation,
            stats.population,
            stats.births,
            stats.deaths,
        )
        if previous and not self.cells:
            log.info("All cells died at generation %d", self.generation)

        if self._step_callback:
            self._step_callback(stats)
        return stats

    def is_extinct(self) -> bool:
        """Whether no live cells remain."""
        return not self.cells

    def get_cells(self) -> Generation:
        """Get the current generation."""
        return self.cells

    def get_stats(self) -> LifeStats:
        """Get the current statistics."""
        return self.stats

    def get_generation(self) -> int:
        """Get the current generation number."""
        return self.generation
