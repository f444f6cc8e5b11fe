"""
Solver Package - Daily puzzle solvers behind one uniform contract.

Every solver turns raw puzzle text into two integer answers and can
optionally report animation steps while it works. Solvers are looked
up by day number through a registry.

Public API:
    - DaySolver: Abstract base for solvers
    - SolutionContext: Input, part and step callback for one run
    - Solution: Answer, recorded steps and metrics
    - SolutionMetrics: Performance statistics
    - AnimationStep: One progress snapshot
    - Grid: Immutable character grid
    - Range: Inclusive integer interval
    - PuzzleInputError: Raised on malformed input
    - create_solver(): Factory function
    - get_solver_days(): List available days
    - get_solver_info(): Get solver metadata

Usage:
    from puzzles.solver import create_solver

    solver = create_solver(7)
    part1, part2 = solver.solve_both(text)

    # Animated variant
    def on_step(description, lines, value):
        print(description)

    answer = solver.solve_part(text, 1, on_step)
"""

# Core data structures
from .errors import PuzzleInputError
from .grid import Grid
from .interval import Range
from .solution import AnimationStep, Solution, SolutionMetrics
from .context import SolutionContext

# Solver framework
from .base import DaySolver
from .factory import (
    create_solver,
    get_solver_days,
    get_solver_info,
    register_solver,
)

# Import days to register them
from . import days

__all__ = [
    # Data structures
    "PuzzleInputError",
    "Grid",
    "Range",
    "AnimationStep",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    # Solver framework
    "DaySolver",
    "create_solver",
    "get_solver_days",
    "get_solver_info",
    "register_solver",
]
