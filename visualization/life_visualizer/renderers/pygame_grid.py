"""Pygame-based grid renderer for Game of Life visualization."""

import pygame
from dataclasses import dataclass

from life_visualizer.config import (
    VisualizerConfig,
    BACKGROUND_COLOR,
    CELL_COLOR,
    STATS_PANEL_WIDTH,
)
from life_visualizer.models.cell import Generation
from life_visualizer.models.life_stats import LifeStats
from life_visualizer.renderers.stats_panel import StatsPanel

WINDOW_TITLE = "Conway's Game of Life"


@dataclass
class RenderResult:
    """Result of a render call with user input information."""

    should_quit: bool = False
    toggle_pause: bool = False
    step_once: bool = False
    reset: bool = False


class PygameGridRenderer:
    """
    Renders the live cells of a generation.

    Each cell (x, y) is a filled square of side cell_size with its top-left
    corner at (x * cell_size, y * cell_size), drawn on a cleared background
    once per frame.
    """

    def __init__(self, config: VisualizerConfig):
        """
        Initialize the pygame renderer.

        Args:
            config: Visualizer configuration.
        """
        self.config = config
        self.cell_size = config.cell_size

        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)

        self.screen = pygame.display.set_mode(
            (config.window_width, config.window_height)
        )

        if config.show_stats:
            self.stats_panel = StatsPanel(
                self.screen,
                x_offset=config.grid_pixel_width,
                width=STATS_PANEL_WIDTH,
                height=config.window_height,
            )
        else:
            self.stats_panel = None

        self.clock = pygame.time.Clock()

    def render(
        self,
        cells: Generation,
        stats: LifeStats,
        generation: int = 0,
        paused: bool = False,
    ) -> RenderResult:
        """
        Render the complete visualization frame.

        Args:
            cells: Live cells to draw.
            stats: Current population statistics.
            generation: Current generation number.
            paused: Whether simulation is paused.

        Returns:
            RenderResult with user input flags.
        """
        result = self.poll_events()

        self.screen.fill(BACKGROUND_COLOR)
        self._draw_cells(cells)

        if self.stats_panel:
            self.stats_panel.render(stats, generation, paused)

        if paused:
            self._draw_pause_overlay()

        pygame.display.flip()

        # Fixed tick rate
        self.clock.tick(self.config.fps)

        return result

    @staticmethod
    def poll_events() -> RenderResult:
        """Translate pending pygame events into a RenderResult."""
        result = RenderResult()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result.should_quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE or event.key == pygame.K_q:
                    result.should_quit = True
                elif event.key == pygame.K_SPACE:
                    result.toggle_pause = True
                elif event.key == pygame.K_n or event.key == pygame.K_RIGHT:
                    result.step_once = True
                elif event.key == pygame.K_r:
                    result.reset = True
        return result

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        """Screen rectangle covered by the cell at (x, y)."""
        return pygame.Rect(
            x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size
        )

    def _draw_cells(self, cells: Generation) -> None:
        """Draw every live cell as a filled square."""
        for x, y in cells:
            pygame.draw.rect(self.screen, CELL_COLOR, self.cell_rect(x, y))

    def _draw_pause_overlay(self) -> None:
        """Draw a semi-transparent pause indicator."""
        overlay = pygame.Surface(
            (self.config.grid_pixel_width, self.config.grid_pixel_height),
            pygame.SRCALPHA,
        )
        overlay.fill((0, 0, 0, 100))
        self.screen.blit(overlay, (0, 0))

        font = pygame.font.SysFont("monospace", 48, bold=True)
        text = font.render("PAUSED", True, (255, 255, 255))
        text_rect = text.get_rect(
            center=(
                self.config.grid_pixel_width // 2,
                self.config.grid_pixel_height // 2,
            )
        )
        self.screen.blit(text, text_rect)

        hint_font = pygame.font.SysFont("monospace", 16)
        hint = hint_font.render(
            "Press SPACE to resume, N to step", True, (200, 200, 200)
        )
        hint_rect = hint.get_rect(
            center=(
                self.config.grid_pixel_width // 2,
                self.config.grid_pixel_height // 2 + 40,
            )
        )
        self.screen.blit(hint, hint_rect)

    def cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
