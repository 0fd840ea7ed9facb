from typing import Iterator
import pygame
import pytest
from life_visualizer.config import STATS_PANEL_BG, VisualizerConfig
from life_visualizer.models.life_stats import LifeStats
from life_visualizer.renderers.pygame_grid import PygameGridRenderer
from test_helpers import cells

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


@pytest.fixture
def renderer(config: VisualizerConfig) -> Iterator[PygameGridRenderer]:
    r = PygameGridRenderer(config)
    yield r
    r.cleanup()


def pixel(renderer: PygameGridRenderer, x: int, y: int) -> tuple:
    return tuple(renderer.screen.get_at((x, y)))[:3]


def test_window_size(renderer: PygameGridRenderer) -> None:
    assert renderer.screen.get_size() == (600, 600)


def test_cells_drawn_as_squares(renderer: PygameGridRenderer) -> None:
    renderer.render(cells((0, 0), (2, 1)), LifeStats())
    assert pixel(renderer, 0, 0) == BLACK
    assert pixel(renderer, 5, 5) == BLACK
    assert pixel(renderer, 6, 6) == WHITE
    assert pixel(renderer, 12, 6) == BLACK
    assert pixel(renderer, 17, 11) == BLACK
    assert pixel(renderer, 18, 11) == WHITE
    assert pixel(renderer, 599, 599) == WHITE


def test_background_cleared_each_frame(renderer: PygameGridRenderer) -> None:
    renderer.render(cells((0, 0)), LifeStats())
    renderer.render(frozenset(), LifeStats())
    assert pixel(renderer, 0, 0) == WHITE


@pytest.mark.parametrize(
    "key,flag",
    [
        (pygame.K_SPACE, "toggle_pause"),
        (pygame.K_n, "step_once"),
        (pygame.K_RIGHT, "step_once"),
        (pygame.K_r, "reset"),
        (pygame.K_q, "should_quit"),
        (pygame.K_ESCAPE, "should_quit"),
    ],
)
def test_key_events(renderer: PygameGridRenderer, key: int, flag: str) -> None:
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))
    result = renderer.render(frozenset(), LifeStats())
    assert getattr(result, flag)


def test_quit_event(renderer: PygameGridRenderer) -> None:
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert renderer.render(frozenset(), LifeStats()).should_quit


def test_pause_overlay_darkens_grid(renderer: PygameGridRenderer) -> None:
    renderer.render(cells((1, 1)), LifeStats(), paused=True)
    shaded = pixel(renderer, 0, 0)
    assert shaded != WHITE
    assert shaded[0] == shaded[1] == shaded[2]
    assert 0 < shaded[0] < 255
    assert pixel(renderer, 6, 6) == BLACK
    renderer.render(cells((1, 1)), LifeStats(), paused=False)
    assert pixel(renderer, 0, 0) == WHITE


def test_stats_panel_drawn_beside_grid() -> None:
    config = VisualizerConfig(show_stats=True)
    r = PygameGridRenderer(config)
    try:
        assert r.screen.get_size() == (config.window_width, config.window_height)
        assert r.stats_panel is not None
        r.render(cells((1, 1)), LifeStats(), generation=3, paused=True)
        assert pixel(r, config.grid_pixel_width + 100, config.window_height - 5) == (
            STATS_PANEL_BG
        )
    finally:
        r.cleanup()
