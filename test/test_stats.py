from life_visualizer.models.life_stats import GenerationStats, LifeStats
from test_helpers import cells


def test_between_counts_births_and_deaths() -> None:
    previous = cells((4, 5), (5, 5), (6, 5))
    current = cells((5, 4), (5, 5), (5, 6))
    stats = GenerationStats.between(7, previous, current)
    assert stats == GenerationStats(generation=7, population=3, births=2, deaths=2)
    assert stats.net_change == 0


def test_record_and_reset() -> None:
    stats = LifeStats()
    stats.reset(population=5)
    assert stats.peak_population == 5
    stats.record(GenerationStats(generation=1, population=8, births=4, deaths=1))
    stats.record(GenerationStats(generation=2, population=6, births=1, deaths=3))
    assert stats.generation == 2
    assert stats.population == 6
    assert stats.total_births == 5
    assert stats.total_deaths == 4
    assert stats.peak_population == 8
    stats.reset()
    assert stats == LifeStats()
