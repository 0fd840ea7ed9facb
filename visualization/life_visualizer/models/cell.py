"""Cell and generation types for the bounded Game of Life world."""

from typing import FrozenSet, Iterable, NamedTuple, Tuple

from life_visualizer.config import WORLD_HEIGHT, WORLD_WIDTH


class Cell(NamedTuple):
    """A grid position. Compared and hashed by value."""

    x: int
    y: int


# All live cells of one step; never mutated once built
Generation = FrozenSet[Cell]


class InvalidCellError(ValueError):
    """Raised when a generation contains a cell outside the grid bounds."""

    def __init__(self, cell: Cell, width: int, height: int):
        self.cell = cell
        self.width = width
        self.height = height
        super().__init__(
            f"Cell {tuple(cell)} is outside the {width}x{height} grid"
        )


def is_valid_cell(
    cell: Cell, width: int = WORLD_WIDTH, height: int = WORLD_HEIGHT
) -> bool:
    """Check if a cell lies within the world limits."""
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def validate_cell(
    cell: Cell, width: int = WORLD_WIDTH, height: int = WORLD_HEIGHT
) -> Cell:
    """
    Return the cell unchanged, or raise if it is out of bounds.

    Raises:
        InvalidCellError: If the cell is outside the grid.
    """
    if not is_valid_cell(cell, width, height):
        raise InvalidCellError(Cell(*cell), width, height)
    return cell


def make_generation(cells: Iterable[Tuple[int, int]] = ()) -> Generation:
    """Build a Generation from any iterable of (x, y) pairs."""
    return frozenset(Cell(x, y) for x, y in cells)
