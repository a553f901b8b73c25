"""
Solver Package - Path enumeration and solution frontier for breach puzzles.

This package finds fixed-length paths through a square token grid that
contain the target sequences, starting in the top row and alternating
vertical and horizontal moves without revisiting a cell. Only
non-dominated solutions are kept.

Public API:
    - Grid: Immutable puzzle (token matrix plus targets)
    - Position, NavigationStep, Direction: Coordinates and moves
    - build(), advance(), iter_paths(): Path enumeration
    - matches(), matched_targets(): Target matching
    - consider(), merge_frontiers(): Frontier maintenance
    - Solution, SolveResult, SolutionMetrics: Results
    - SolveContext: Cancellation, budgets and progress
    - SolverStrategy: Abstract base for strategies
    - create_strategy(), solve(): Factory and one-call entry point

Usage:
    from breach_solver.solver import Grid, solve

    grid = Grid.from_text(open("puzzle.txt").read())
    result = solve(grid, buffer_size=6)

    for solution in result.solutions:
        print(solution.describe())
"""

# Core data structures
from .grid import Grid, Token, Target
from .position import Position, NavigationStep, Direction
from .solution import Solution, SolutionMetrics, SolveResult
from .context import SolveContext, STOP_CANCELLED, STOP_TIMEOUT, STOP_STEP_BUDGET
from .errors import SolverError, InfeasibleConfigurationError, PathLengthError

# Algorithms
from .chain import build, build_from, advance, iter_paths, is_valid_path, is_last_available
from .matcher import matches, matched_targets
from .frontier import consider, merge_frontiers, is_dominated

# Strategy framework
from .base import SolverStrategy, SeedOutcome
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
    solve,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "Grid",
    "Token",
    "Target",
    "Position",
    "NavigationStep",
    "Direction",
    "Solution",
    "SolutionMetrics",
    "SolveResult",
    "SolveContext",
    "STOP_CANCELLED",
    "STOP_TIMEOUT",
    "STOP_STEP_BUDGET",
    # Errors
    "SolverError",
    "InfeasibleConfigurationError",
    "PathLengthError",
    # Algorithms
    "build",
    "build_from",
    "advance",
    "iter_paths",
    "is_valid_path",
    "is_last_available",
    "matches",
    "matched_targets",
    "consider",
    "merge_frontiers",
    "is_dominated",
    # Strategy framework
    "SolverStrategy",
    "SeedOutcome",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve",
]
