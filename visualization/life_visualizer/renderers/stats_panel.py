"""Stats panel renderer for population statistics."""

import pygame
from typing import Optional

from life_visualizer.config import (
    STATS_PANEL_BG,
    TEXT_COLOR,
    TEXT_HIGHLIGHT_COLOR,
    BIRTH_COLOR,
    DEATH_COLOR,
)
from life_visualizer.models.life_stats import LifeStats


class StatsPanel:
    """
    Renders the statistics sidebar panel.

    Displays:
    - Current generation and population
    - Births and deaths of the last step
    - Running totals and controls
    """

    def __init__(
        self,
        screen: pygame.Surface,
        x_offset: int,
        width: int,
        height: int,
    ):
        """
        Initialize the stats panel.

        Args:
            screen: Pygame surface to draw on.
            x_offset: X position where panel starts.
            width: Width of the panel.
            height: Height of the panel.
        """
        self.screen = screen
        self.x = x_offset
        self.width = width
        self.height = height

        pygame.font.init()
        self.title_font = pygame.font.SysFont("monospace", 16, bold=True)
        self.header_font = pygame.font.SysFont("monospace", 14, bold=True)
        self.font = pygame.font.SysFont("monospace", 12)

        # Layout constants
        self.padding = 10
        self.line_height = 18
        self.section_gap = 10

    def render(self, stats: LifeStats, generation: int, paused: bool = False) -> None:
        """
        Render the stats panel.

        Args:
            stats: Current population statistics.
            generation: Current generation number.
            paused: Whether simulation is paused.
        """
        pygame.draw.rect(
            self.screen,
            STATS_PANEL_BG,
            (self.x, 0, self.width, self.height),
        )
        pygame.draw.line(
            self.screen,
            (60, 60, 70),
            (self.x, 0),
            (self.x, self.height),
            2,
        )

        y = self.padding

        y = self._draw_text(
            "═══ Game of Life ═══",
            y,
            self.title_font,
            TEXT_HIGHLIGHT_COLOR,
            center=True,
        )
        y += self.section_gap

        if paused:
            y = self._draw_text("Status: PAUSED", y, self.header_font, (255, 200, 0))
            y += self.section_gap // 2

        y = self._draw_text(f"Generation: {generation}", y, self.header_font)
        y = self._draw_text(f"Live Cells: {stats.population}", y)
        y += self.section_gap

        y = self._draw_separator(y)
        y += self.section_gap // 2

        latest = stats.latest
        y = self._draw_text("─── Last Step ───", y, self.header_font)
        y = self._draw_text(f"  Births: {latest.births}", y, color=BIRTH_COLOR)
        y = self._draw_text(f"  Deaths: {latest.deaths}", y, color=DEATH_COLOR)
        y = self._draw_text(f"  Net:    {latest.net_change:+d}", y)
        y += self.section_gap // 2

        y = self._draw_separator(y)
        y += self.section_gap // 2

        y = self._draw_text("─── TOTALS ───", y, self.header_font, TEXT_HIGHLIGHT_COLOR)
        y = self._draw_text(f"  Births: {stats.total_births}", y)
        y = self._draw_text(f"  Deaths: {stats.total_deaths}", y)
        y = self._draw_text(f"  Peak:   {stats.peak_population}", y)
        y += self.section_gap

        y = self._draw_separator(y)
        y += self.section_gap // 2

        y = self._draw_text(
            "─── Controls ───", y, self.header_font, TEXT_HIGHLIGHT_COLOR
        )
        y = self._draw_text("  SPACE: Pause/Resume", y)
        y = self._draw_text("  N/→: Step once", y)
        y = self._draw_text("  R: Reset", y)
        y = self._draw_text("  Q/ESC: Quit", y)

    def _draw_text(
        self,
        text: str,
        y: int,
        font: Optional[pygame.font.Font] = None,
        color: tuple = TEXT_COLOR,
        center: bool = False,
    ) -> int:
        """
        Draw text at the specified position.

        Returns:
            Y position after this text (for chaining).
        """
        if font is None:
            font = self.font

        surface = font.render(text, True, color)

        if center:
            x = self.x + (self.width - surface.get_width()) // 2
        else:
            x = self.x + self.padding

        self.screen.blit(surface, (x, y))
        return y + self.line_height

    def _draw_separator(self, y: int) -> int:
        """Draw a horizontal separator line."""
        pygame.draw.line(
            self.screen,
            (60, 60, 70),
            (self.x + self.padding, y),
            (self.x + self.width - self.padding, y),
            1,
        )
        return y + 5
