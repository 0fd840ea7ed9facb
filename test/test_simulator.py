import logging
from typing import List
import pytest
from life_visualizer.config import VisualizerConfig
from life_visualizer.models.cell import Cell
from life_visualizer.models.life_stats import GenerationStats
from life_visualizer.simulation.dense import DenseGenerationEngine
from life_visualizer.simulation.engine import GenerationEngine
from life_visualizer.simulation.life_simulator import LifeSimulator, create_engine
from test_helpers import cells


def test_starts_empty(config: VisualizerConfig) -> None:
    sim = LifeSimulator(config)
    assert sim.get_cells() == frozenset()
    assert sim.get_generation() == 0
    assert sim.is_extinct()
    assert isinstance(sim.engine, GenerationEngine)


def test_initialize_pattern_resets(config: VisualizerConfig) -> None:
    sim = LifeSimulator(config)
    sim.initialize_pattern("glider")
    sim.step()
    sim.initialize_pattern("block")
    assert sim.get_generation() == 0
    assert len(sim.get_cells()) == 4
    assert sim.get_stats().population == 4
    assert sim.get_stats().total_births == 0


def test_step_replaces_generation(config: VisualizerConfig) -> None:
    sim = LifeSimulator(config)
    sim.initialize_cells(cells((4, 5), (5, 5), (6, 5)))
    first = sim.get_cells()
    stats = sim.step()
    assert first == cells((4, 5), (5, 5), (6, 5))
    assert sim.get_cells() == cells((5, 4), (5, 5), (5, 6))
    assert stats == GenerationStats(generation=1, population=3, births=2, deaths=2)
    assert sim.get_generation() == 1
    assert sim.get_stats().latest is stats


def test_step_callback(config: VisualizerConfig) -> None:
    seen: List[GenerationStats] = []
    sim = LifeSimulator(config)
    sim.set_step_callback(seen.append)
    sim.initialize_pattern("blinker")
    sim.step()
    sim.step()
    assert [s.generation for s in seen] == [1, 2]


def test_extinction_is_logged(
    config: VisualizerConfig, caplog: pytest.LogCaptureFixture
) -> None:
    sim = LifeSimulator(config)
    sim.initialize_cells(cells((5, 5)))
    with caplog.at_level(logging.INFO, logger="life_visualizer"):
        sim.step()
    assert sim.is_extinct()
    assert "All cells died at generation 1" in caplog.text


def test_dense_engine(config: VisualizerConfig) -> None:
    sim = LifeSimulator(config, create_engine("dense", config))
    assert isinstance(sim.engine, DenseGenerationEngine)
    sim.initialize_pattern("glider")
    start = sim.get_cells()
    for _ in range(4):
        sim.step()
    assert sim.get_cells() == {Cell(x + 1, y + 1) for x, y in start}


def test_unknown_engine(config: VisualizerConfig) -> None:
    with pytest.raises(KeyError):
        create_engine("hashlife", config)
