"""Population statistics models."""

from dataclasses import dataclass, field

from life_visualizer.models.cell import Generation


@dataclass
class GenerationStats:
    """Statistics for a single generation transition."""

    generation: int

    # Cell counters
    population: int = 0
    births: int = 0
    deaths: int = 0

    @property
    def net_change(self) -> int:
        """Population change relative to the previous generation."""
        return self.births - self.deaths

    @classmethod
    def between(
        cls, generation: int, previous: Generation, current: Generation
    ) -> "GenerationStats":
        """Compare two consecutive generations."""
        return cls(
            generation=generation,
            population=len(current),
            births=len(current - previous),
            deaths=len(previous - current),
        )


@dataclass
class LifeStats:
    """Running totals across the current simulation run."""

    latest: GenerationStats = field(
        default_factory=lambda: GenerationStats(generation=0)
    )
    total_births: int = 0
    total_deaths: int = 0
    peak_population: int = 0

    @property
    def generation(self) -> int:
        """Generation number of the latest record."""
        return self.latest.generation

    @property
    def population(self) -> int:
        """Live cell count of the latest record."""
        return self.latest.population

    def record(self, stats: GenerationStats) -> None:
        """Fold one transition into the running totals."""
        self.latest = stats
        self.total_births += stats.births
        self.total_deaths += stats.deaths
        if stats.population > self.peak_population:
            self.peak_population = stats.population

    def reset(self, population: int = 0) -> None:
        """Reset all statistics for a fresh starting generation."""
        self.latest = GenerationStats(generation=0, population=population)
        self.total_births = 0
        self.total_deaths = 0
        self.peak_population = population
