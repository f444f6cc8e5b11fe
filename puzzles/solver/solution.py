"""
Solution Module - Result of a solver run and its animation steps.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class AnimationStep:
    """
    One human-readable progress snapshot.

    Attributes:
        description: Short caption for the step
        lines: Visualization lines (grid rows, boxes, lists)
        value: Running value of the computation at this point
    """
    description: str
    lines: Tuple[str, ...] = ()
    value: int = 0


@dataclass
class SolutionMetrics:
    """
    Performance metrics for one solver run.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        steps_reported: Animation steps delivered to the callback
        steps_dropped: Animation steps skipped because of the step limit
        solver_name: Title of the solver that produced the answer
    """
    computation_time_ms: float = 0.0
    steps_reported: int = 0
    steps_dropped: int = 0
    solver_name: str = ""


@dataclass
class Solution:
    """
    Result of solving one part of one day.

    Attributes:
        day: Puzzle day number
        part: Puzzle part (1 or 2)
        answer: Integer answer
        steps: Recorded animation steps (empty unless recorded)
        metrics: Performance statistics
    """
    day: int
    part: int
    answer: int
    steps: List[AnimationStep] = field(default_factory=list)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def step_count(self) -> int:
        """Number of recorded steps."""
        return len(self.steps)

    @property
    def final_step(self) -> AnimationStep | None:
        """Last recorded step, or None if nothing was recorded."""
        return self.steps[-1] if self.steps else None
