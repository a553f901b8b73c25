"""
Strategy Factory Module - Registry of solving strategies and the one-call solve().
"""

from typing import Any, Dict, List, Optional, Type

from .base import SolverStrategy
from .context import SolveContext
from .grid import Grid
from .solution import SolveResult


DEFAULT_STRATEGY = "sequential"

# Strategy name -> class, filled by @register_strategy at import time
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    Usage:
        @register_strategy
        class ReverseStrategy(SolverStrategy):
            name = "reverse"
            ...

    Args:
        cls: SolverStrategy subclass

    Returns:
        cls unchanged
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Registered name ("sequential", "parallel", ...)
        **kwargs: Constructor options, e.g. max_workers for "parallel"

    Returns:
        New strategy instance

    Raises:
        ValueError: If no strategy is registered under name
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    """Registered strategy names, in registration order."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Describe every registered strategy, for --list-strategies.

    Returns:
        One {"name", "description"} dict per strategy
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        Default strategy name ("sequential" if available, else first registered)
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return ""


def solve(grid: Grid, buffer_size: int, strategy_name: Optional[str] = None,
          **context_options: Any) -> SolveResult:
    """
    Solve a puzzle in one call.

    Args:
        grid: Grid with its targets
        buffer_size: Required path length
        strategy_name: Registered strategy (default strategy if None)
        **context_options: Extra SolveContext fields (timeout_sec,
            step_budget, skip_infeasible_seeds, cancel_flag, ...).
            No time limit unless timeout_sec is given.

    Returns:
        SolveResult with the solution frontier

    Raises:
        InfeasibleConfigurationError: If the buffer size cannot be reached
    """
    strategy = create_strategy(strategy_name or get_default_strategy_name())
    context = SolveContext(grid=grid, buffer_size=buffer_size, **context_options)
    return strategy.solve(context)
