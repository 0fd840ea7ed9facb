import os

# Headless pygame for renderer tests; must be set before the display starts
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402
from life_visualizer.config import VisualizerConfig  # noqa: E402


@pytest.fixture
def config() -> VisualizerConfig:
    return VisualizerConfig()
