"""Main entry point for the Game of Life visualizer."""

import argparse
import logging
import sys
from typing import List, Optional

import colorlog

from life_visualizer.config import VisualizerConfig
from life_visualizer.models.life_stats import GenerationStats
from life_visualizer.renderers.pygame_grid import PygameGridRenderer
from life_visualizer.simulation.life_simulator import (
    ENGINES,
    LifeSimulator,
    create_engine,
)
from life_visualizer.simulation.patterns import PATTERN_NAMES

log = logging.getLogger(__name__)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Conway's Game of Life",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  window    - Animate the world in a pygame window (default)
  headless  - Step a fixed number of generations and print a summary

Examples:
  # Classic start generation in a window
  python -m life_visualizer

  # Glider gun with the stats sidebar
  python -m life_visualizer --pattern glider_gun --stats

  # 200 generations of an acorn on the NumPy engine, no window
  python -m life_visualizer --headless --pattern acorn --engine dense --generations 200
        """,
    )

    parser.add_argument(
        "--pattern",
        "-p",
        type=str,
        default="default",
        choices=PATTERN_NAMES,
        help="Initial pattern (default: the classic start generation)",
    )
    parser.add_argument(
        "--engine",
        type=str,
        default="sparse",
        choices=sorted(ENGINES),
        help="Transition engine: sparse cell sets or dense NumPy arrays",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show the stats panel",
    )

    # Headless mode options
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window and print one line per generation",
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=100,
        help="Number of generations to run (headless mode)",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=LOG_LEVELS,
        help="Set logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> VisualizerConfig:
    """Create a VisualizerConfig from parsed arguments."""
    if args.headless and args.generations < 1:
        print(f"Error: --generations must be at least 1, got {args.generations}")
        sys.exit(1)

    return VisualizerConfig(show_stats=args.stats)


def format_stats(stats: GenerationStats) -> str:
    """One summary line for a generation."""
    return (
        f"Generation {stats.generation:>5}: {stats.population:>5} live"
        f" (+{stats.births} -{stats.deaths})"
    )


def run_window(config: VisualizerConfig, simulator: LifeSimulator, pattern: str) -> None:
    """
    Animate the simulation in a pygame window.

    Args:
        config: Visualizer configuration.
        simulator: Simulator already initialized with the pattern.
        pattern: Pattern name used for resets.
    """
    print("=" * 60)
    print("Conway's Game of Life")
    print("=" * 60)
    print(f"Grid: {config.grid_width}x{config.grid_height}")
    print(f"Pattern: {pattern}")
    print(f"FPS: {config.fps}")
    print("=" * 60)
    print("Controls:")
    print("  SPACE     - Pause/Resume")
    print("  N / →     - Step once (when paused)")
    print("  R         - Reset simulation")
    print("  Q / ESC   - Quit")
    print("=" * 60)

    renderer = PygameGridRenderer(config)

    running = True
    paused = False

    try:
        while running:
            result = renderer.render(
                simulator.get_cells(),
                simulator.get_stats(),
                simulator.get_generation(),
                paused,
            )

            if result.should_quit:
                running = False
            elif result.toggle_pause:
                paused = not paused
                print(f"{'Paused' if paused else 'Resumed'}")
            elif result.step_once and paused:
                simulator.step()
            elif result.reset:
                simulator.initialize_pattern(pattern)
                print("Reset simulation")

            if running and not paused:
                simulator.step()

    except KeyboardInterrupt:
        print("\nInterrupted by user")
    finally:
        renderer.cleanup()

    print(f"\nSimulation ended at generation {simulator.get_generation()}")
    print(f"Live cells: {simulator.get_stats().population}")


def run_headless(simulator: LifeSimulator, generations: int) -> None:
    """
    Step the simulation without a window.

    Args:
        simulator: Simulator already initialized with the pattern.
        generations: Number of generations to compute.
    """
    simulator.set_step_callback(lambda stats: print(format_stats(stats)))

    try:
        for _ in range(generations):
            simulator.step()
    except KeyboardInterrupt:
        print("\nInterrupted by user")

    stats = simulator.get_stats()
    print(f"\nFinal generation: {simulator.get_generation()}")
    print(f"Live cells: {stats.population}")
    print(f"Peak population: {stats.peak_population}")
    print(f"Total births: {stats.total_births}, total deaths: {stats.total_deaths}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    colorlog.basicConfig(
        format="%(log_color)s[%(levelname)-8s] %(message)s",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "bold",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
    )
    config = create_config_from_args(args)

    simulator = LifeSimulator(config, create_engine(args.engine, config))
    simulator.initialize_pattern(args.pattern)
    log.debug("Using %s engine", args.engine)

    if args.headless:
        run_headless(simulator, args.generations)
    else:
        run_window(config, simulator, args.pattern)


if __name__ == "__main__":
    main()
