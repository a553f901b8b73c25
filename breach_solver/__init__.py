"""
Breach Solver - Finds buffer paths for breach protocol code-matrix puzzles.
"""

__version__ = "1.0.0"
