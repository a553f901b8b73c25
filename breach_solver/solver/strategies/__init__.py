"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .sequential import SequentialStrategy
from .parallel import ParallelStrategy

__all__ = [
    "SequentialStrategy",
    "ParallelStrategy",
]
