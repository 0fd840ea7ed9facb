"""Sparse Game of Life transition over a set of live cells."""

from collections import Counter
from typing import Iterable, List, Set

from life_visualizer.config import NEIGHBOR_OFFSETS, WORLD_HEIGHT, WORLD_WIDTH
from life_visualizer.models.cell import (
    Cell,
    Generation,
    InvalidCellError,
    is_valid_cell,
)

# Neighbor counts that keep a live cell alive
SURVIVAL_COUNTS = frozenset((2, 3))
# Neighbor count that brings a dead cell to life
BIRTH_COUNT = 3


class GenerationEngine:
    """
    Computes the next generation of a bounded Game of Life world.

    Rules:
    1. Any live cell with 2 or 3 live neighbors survives.
    2. Any dead cell with exactly 3 live neighbors becomes alive.
    3. All other cells die or stay dead.

    The grid is bounded, not wrapped: positions outside the grid are never
    neighbors, so edge and corner cells have smaller neighborhoods.

    Only neighbors of live cells are tallied, so cells with no live
    neighbors are never considered for birth.
    """

    def __init__(self, width: int = WORLD_WIDTH, height: int = WORLD_HEIGHT):
        """
        Initialize the engine.

        Args:
            width: Number of columns in the grid.
            height: Number of rows in the grid.
        """
        self.width = width
        self.height = height

    def is_valid(self, cell: Cell) -> bool:
        """Check if a cell lies within this engine's grid."""
        return is_valid_cell(cell, self.width, self.height)

    def neighbors(self, cell: Cell) -> List[Cell]:
        """
        Determine all in-bounds neighbors of a cell.

        Args:
            cell: The cell whose neighborhood to enumerate.

        Returns:
            Neighbor positions in offset order (3 for corners, 5 for edges).
        """
        x, y = cell
        result = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                result.append(Cell(nx, ny))
        return result

    @staticmethod
    def count_live_neighbors(generation: Generation, neighbors: Iterable[Cell]) -> int:
        """Count how many of the given positions are alive."""
        return sum(1 for neighbor in neighbors if neighbor in generation)

    @staticmethod
    def tally_neighbors(tally: Counter, neighbors: Iterable[Cell]) -> None:
        """Add one appearance for each neighbor position."""
        tally.update(neighbors)

    @staticmethod
    def births(tally: Counter) -> Set[Cell]:
        """Return every position that appeared exactly three times."""
        return {cell for cell, count in tally.items() if count == BIRTH_COUNT}

    def next_generation(self, current: Generation) -> Generation:
        """
        Compute the next generation from the current one.

        Args:
            current: All live cells of the current step.

        Returns:
            A new frozenset with the live cells of the next step.

        Raises:
            InvalidCellError: If a live cell is outside the grid.
        """
        survivors: Set[Cell] = set()
        tally: Counter = Counter()

        for cell in current:
            if not self.is_valid(cell):
                raise InvalidCellError(Cell(*cell), self.width, self.height)

            neighbors = self.neighbors(cell)
            if self.count_live_neighbors(current, neighbors) in SURVIVAL_COUNTS:
                survivors.add(cell)
            self.tally_neighbors(tally, neighbors)

        # Live cells with a tally of 3 are already survivors; the union dedupes
        return frozenset(survivors | self.births(tally))


_default_engine = GenerationEngine()


def next_generation(current: Generation) -> Generation:
    """Step a generation on the default 100x100 world."""
    return _default_engine.next_generation(current)
