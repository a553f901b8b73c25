"""
Breach Solver - Entry Point

Solves a breach protocol puzzle read from a text file and prints the
non-dominated solutions, one per line.

Example:
    python main.py puzzle.txt
    python main.py puzzle.txt --buffer 6 --strategy parallel
    python main.py puzzle.txt --steps 100000 --debug
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from breach_solver.solver import (
    Grid,
    InfeasibleConfigurationError,
    get_strategy_info,
    get_strategy_names,
    solve,
)
from breach_solver.settings import load_settings, save_settings
from breach_solver.debug import save_debug_image

logger = logging.getLogger(__name__)


EXIT_OK = 0
EXIT_INFEASIBLE = 1
EXIT_BAD_INPUT = 2
EXIT_STOPPED = 3


def configure_logging(verbose: bool = False) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stderr),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Breach Solver - Find buffer paths that upload the most targets"
    )
    parser.add_argument(
        "puzzle",
        nargs="?",
        help="Puzzle text file: grid rows, blank line, one target per line"
    )
    parser.add_argument(
        "--buffer", "-b",
        type=int,
        help="Buffer size / path length (default from config.json)"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Solving strategy (default from config.json)"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        help="Timeout in seconds, 0 for none"
    )
    parser.add_argument(
        "--steps",
        type=int,
        help="Maximum paths to examine, 0 for unlimited"
    )
    parser.add_argument(
        "--skip-infeasible",
        action="store_true",
        help="Skip seed columns that cannot reach the buffer size instead of failing"
    )
    parser.add_argument(
        "--arrows",
        action="store_true",
        help="Print moves as arrows instead of words"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Save an image of the best solution to ./debug"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Persist the given options to config.json"
    )
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="List available strategies and exit"
    )
    return parser.parse_args(argv)


def merge_settings(settings: Dict[str, Any], args) -> Dict[str, Any]:
    """
    Apply command line overrides on top of saved settings.

    Args:
        settings: Loaded settings
        args: Parsed arguments

    Returns:
        Effective settings for this run
    """
    effective = dict(settings)
    if args.buffer is not None:
        effective["buffer_size"] = args.buffer
    if args.strategy is not None:
        effective["strategy_name"] = args.strategy
    if args.timeout is not None:
        effective["timeout_sec"] = args.timeout
    if args.steps is not None:
        effective["step_budget"] = args.steps
    if args.skip_infeasible:
        effective["skip_infeasible_seeds"] = True
    if args.debug:
        effective["debug_enabled"] = True
    return effective


def run(args) -> int:
    """
    Solve the puzzle named in args.

    Returns:
        Exit code
    """
    if args.list_strategies:
        for info in get_strategy_info():
            print(f"{info['name']:<12} {info['description']}")
        return EXIT_OK

    if not args.puzzle:
        logger.error("No puzzle file given")
        return EXIT_BAD_INPUT

    settings = merge_settings(load_settings(), args)
    if args.save_settings:
        save_settings(settings)

    try:
        text = Path(args.puzzle).read_text(encoding="utf-8")
        grid = Grid.from_text(text)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read puzzle {args.puzzle}: {e}")
        return EXIT_BAD_INPUT

    logger.info(
        f"Solving {grid.size}x{grid.size} grid, {grid.target_count} targets, "
        f"buffer {settings['buffer_size']}, strategy {settings['strategy_name']}"
    )

    try:
        result = solve(
            grid,
            settings["buffer_size"],
            strategy_name=settings["strategy_name"],
            timeout_sec=settings["timeout_sec"],
            step_budget=settings["step_budget"],
            skip_infeasible_seeds=settings["skip_infeasible_seeds"],
        )
    except InfeasibleConfigurationError as e:
        logger.error(f"Infeasible: {e}")
        return EXIT_INFEASIBLE
    except ValueError as e:
        logger.error(f"Invalid puzzle: {e}")
        return EXIT_BAD_INPUT

    for solution in result.solutions:
        print(solution.describe(arrows=args.arrows))

    logger.info(
        f"{result.solution_count} solutions, {result.metrics.paths_explored} paths, "
        f"{result.metrics.computation_time_ms:.1f}ms"
    )

    if settings["debug_enabled"] and result.best_solution is not None:
        path = save_debug_image(grid, result.best_solution)
        logger.info(f"Debug image saved: {path}")

    if result.was_cancelled:
        logger.warning(f"Search stopped early: {result.stop_reason}")
        if not result.has_solutions:
            return EXIT_STOPPED

    return EXIT_OK


def main():
    """Initialize and run the Breach Solver command line."""
    args = parse_args()
    configure_logging(args.verbose)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
