"""Simulation package for the Game of Life."""

from life_visualizer.simulation.engine import GenerationEngine, next_generation
from life_visualizer.simulation.dense import DenseGenerationEngine
from life_visualizer.simulation.life_simulator import LifeSimulator, create_engine

__all__ = [
    "GenerationEngine",
    "next_generation",
    "DenseGenerationEngine",
    "LifeSimulator",
    "create_engine",
]
