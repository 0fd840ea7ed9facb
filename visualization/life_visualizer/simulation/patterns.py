"""Starting patterns for the Game of Life world."""

from typing import Iterable, List, Sequence

from life_visualizer.config import WORLD_HEIGHT, WORLD_WIDTH
from life_visualizer.models.cell import Cell, Generation, is_valid_cell, make_generation

LIVE_CHAR = "O"

# The classic start generation shown when no pattern is requested
START_GENERATION: Generation = make_generation(
    [
        (1, 1), (1, 5), (1, 6), (2, 6), (11, 5), (11, 6), (11, 7),
        (12, 4), (12, 8), (13, 3), (13, 9), (14, 3), (14, 9),
        (15, 6), (16, 4), (16, 8), (17, 5), (17, 6), (17, 7),
        (18, 6), (21, 3), (21, 4), (21, 5), (22, 3), (22, 4),
        (22, 5), (23, 2), (23, 6), (25, 1), (25, 2), (25, 6),
        (25, 7), (35, 3), (35, 4), (36, 3), (36, 4),
    ]
)  # fmt: skip

GLIDER = [
    ".O.",
    "..O",
    "OOO",
]

# Gosper Glider Gun - creates gliders continuously
GOSPER_GLIDER_GUN = [
    "........................O...........",
    "......................O.O...........",
    "............OO......OO............OO",
    "...........O...O....OO............OO",
    "OO........O.....O...OO..............",
    "OO........O...O.OO....O.O...........",
    "..........O.....O.......O...........",
    "...........O...O....................",
    "............OO......................",
]

# Takes 5206 generations to stabilize
ACORN = [
    ".O.....",
    "...O...",
    "OO..OOO",
]

# Chaotic growth from five cells
R_PENTOMINO = [
    ".OO",
    "OO.",
    ".O.",
]

BLOCK = [
    "OO",
    "OO",
]

BLINKER = ["OOO"]

PATTERN_NAMES = (
    "default",
    "glider",
    "glider_gun",
    "acorn",
    "rpentomino",
    "block",
    "blinker",
)


def pattern_from_rows(
    rows: Sequence[str],
    x: int = 0,
    y: int = 0,
    width: int = WORLD_WIDTH,
    height: int = WORLD_HEIGHT,
) -> Generation:
    """
    Place a row-string pattern with its top-left corner at (x, y).

    Args:
        rows: One string per row; LIVE_CHAR marks a live cell.
        x: Column of the pattern's left edge.
        y: Row of the pattern's top edge.
        width: Grid width used for clipping.
        height: Grid height used for clipping.

    Returns:
        The live cells that fall inside the grid.
    """
    cells: List[Cell] = []
    for dy, row in enumerate(rows):
        for dx, char in enumerate(row):
            if char == LIVE_CHAR:
                cells.append(Cell(x + dx, y + dy))
    return clip(cells, width, height)


def clip(cells: Iterable[Cell], width: int, height: int) -> Generation:
    """Drop every cell outside the grid."""
    return frozenset(
        Cell(*cell) for cell in cells if is_valid_cell(cell, width, height)
    )


def get_pattern(
    name: str = "default", width: int = WORLD_WIDTH, height: int = WORLD_HEIGHT
) -> Generation:
    """
    Build a named starting pattern for a grid of the given size.

    Args:
        name: One of PATTERN_NAMES.
        width: Grid width.
        height: Grid height.

    Raises:
        KeyError: If the pattern name is unknown.
    """
    center_x = width // 2
    center_y = height // 2

    if name == "default":
        return clip(START_GENERATION, width, height)
    elif name == "glider":
        return pattern_from_rows(GLIDER, center_x - 10, center_y - 10, width, height)
    elif name == "glider_gun":
        return pattern_from_rows(GOSPER_GLIDER_GUN, 2, 5, width, height)
    elif name == "acorn":
        return pattern_from_rows(ACORN, center_x - 3, center_y - 1, width, height)
    elif name == "rpentomino":
        return pattern_from_rows(R_PENTOMINO, center_x - 1, center_y - 1, width, height)
    elif name == "block":
        return pattern_from_rows(BLOCK, center_x - 1, center_y - 1, width, height)
    elif name == "blinker":
        return pattern_from_rows(BLINKER, center_x - 1, center_y, width, height)
    raise KeyError(f"Unknown pattern: {name!r}")
