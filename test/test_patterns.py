import pytest
from life_visualizer.models.cell import Cell, is_valid_cell
from life_visualizer.simulation.engine import next_generation
from life_visualizer.simulation.patterns import (
    GLIDER,
    GOSPER_GLIDER_GUN,
    PATTERN_NAMES,
    START_GENERATION,
    get_pattern,
    pattern_from_rows,
)


def test_start_generation() -> None:
    assert len(START_GENERATION) == 36
    assert Cell(1, 1) in START_GENERATION
    assert Cell(36, 4) in START_GENERATION
    assert get_pattern("default") == START_GENERATION


def test_pattern_from_rows_places_top_left_corner() -> None:
    assert pattern_from_rows(GLIDER, 10, 20) == {
        Cell(11, 20),
        Cell(12, 21),
        Cell(10, 22),
        Cell(11, 22),
        Cell(12, 22),
    }


def test_pattern_from_rows_clips_to_grid() -> None:
    assert pattern_from_rows(GLIDER, 98, 98) == {Cell(99, 98)}


def test_glider_gun_size() -> None:
    gun = get_pattern("glider_gun")
    assert len(gun) == 36
    assert gun == pattern_from_rows(GOSPER_GLIDER_GUN, 2, 5)


@pytest.mark.parametrize("name", PATTERN_NAMES)
@pytest.mark.parametrize("size", [(100, 100), (20, 20), (8, 5)])
def test_patterns_fit_grid(name: str, size: tuple) -> None:
    width, height = size
    assert all(is_valid_cell(c, width, height) for c in get_pattern(name, width, height))


def test_block_and_blinker() -> None:
    block = get_pattern("block")
    assert next_generation(block) == block
    blinker = get_pattern("blinker")
    assert next_generation(blinker) != blinker
    assert next_generation(next_generation(blinker)) == blinker


def test_unknown_pattern() -> None:
    with pytest.raises(KeyError):
        get_pattern("spaceship")
