"""
Days Package - Concrete daily solvers.

Import this module to register all built-in solvers.
"""

from .dial import DialSolver
from .pattern_ranges import PatternRangeSolver
from .batteries import BatterySelector
from .paper_rolls import GridAccessibilitySolver
from .fresh_ranges import RangeMergeSolver
from .worksheet import WorksheetSolver
from .beam_splitter import BeamSplitSolver

__all__ = [
    "DialSolver",
    "PatternRangeSolver",
    "BatterySelector",
    "GridAccessibilitySolver",
    "RangeMergeSolver",
    "WorksheetSolver",
    "BeamSplitSolver",
]
