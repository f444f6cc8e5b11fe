"""
Base Solver Module - Abstract base class for daily puzzle solvers.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .context import DEFAULT_MAX_STEPS, SolutionContext, StepCallback
from .parsing import RawInput
from .solution import AnimationStep, Solution, SolutionMetrics

logger = logging.getLogger(__name__)


class DaySolver(ABC):
    """
    Abstract base class for all daily puzzle solvers.

    Subclasses implement solve_part1() and solve_part2() and define
    the day, title and description class attributes. Solvers hold no
    state between calls, so one instance can be reused freely.

    Attributes:
        day: Puzzle day number used as the registry key
        title: Puzzle title
        description: Human-readable summary of the algorithm
    """
    day: int = 0
    title: str = "base"
    description: str = "Base solver"

    @abstractmethod
    def solve_part1(self, context: SolutionContext) -> int:
        """
        Compute the Part 1 answer.

        May call context.report_step() to publish progress snapshots.

        Args:
            context: Solution context with raw input and step callback

        Returns:
            Integer answer
        """
        pass

    @abstractmethod
    def solve_part2(self, context: SolutionContext) -> int:
        """Compute the Part 2 answer. See solve_part1()."""
        pass

    def solve(self, context: SolutionContext) -> Solution:
        """
        Run one part and wrap the answer in a Solution.

        Args:
            context: Solution context selecting the part

        Returns:
            Solution with answer and metrics
        """
        start_time = time.perf_counter()

        if context.part == 1:
            answer = self.solve_part1(context)
        else:
            answer = self.solve_part2(context)

        context.report_step(
            f"Day {self.day} Part {context.part} answer: {answer}",
            [f"{self.title}", f"Answer: {answer}"],
            answer,
            final=True
        )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Day {self.day} part {context.part}: {answer} ({elapsed_ms:.1f}ms)"
        )

        return Solution(
            day=self.day,
            part=context.part,
            answer=answer,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                steps_reported=context.steps_reported,
                steps_dropped=context.steps_dropped,
                solver_name=self.title
            )
        )

    def part1(self, raw_input: RawInput) -> int:
        """Part 1 answer for raw input, without animation."""
        return self.solve(SolutionContext(raw_input=raw_input, part=1)).answer

    def part2(self, raw_input: RawInput) -> int:
        """Part 2 answer for raw input, without animation."""
        return self.solve(SolutionContext(raw_input=raw_input, part=2)).answer

    def solve_both(self, raw_input: RawInput) -> Tuple[int, int]:
        """
        Solve both parts.

        Returns:
            (part1 answer, part2 answer)
        """
        return self.part1(raw_input), self.part2(raw_input)

    def solve_part(
        self,
        raw_input: RawInput,
        part: int,
        on_step: Optional[StepCallback] = None,
        max_steps: int = DEFAULT_MAX_STEPS
    ) -> int:
        """
        Animated variant: same answer, plus progress snapshots.

        on_step is called synchronously, in computation order, with
        (description, visualization_lines, current_value).

        Args:
            raw_input: Puzzle input
            part: 1 or 2
            on_step: Step callback
            max_steps: Cap on intermediate steps delivered

        Returns:
            Integer answer, identical to part1()/part2()
        """
        context = SolutionContext(
            raw_input=raw_input,
            part=part,
            step_callback=on_step,
            max_steps=max_steps
        )
        return self.solve(context).answer

    def animate(
        self,
        raw_input: RawInput,
        part: int,
        max_steps: int = DEFAULT_MAX_STEPS
    ) -> Solution:
        """
        Solve a part and record every delivered step on the Solution.

        Returns:
            Solution whose steps list holds the recorded AnimationSteps
        """
        steps: List[AnimationStep] = []

        def record(description: str, lines: List[str], value: int) -> None:
            steps.append(AnimationStep(description, tuple(lines), value))

        context = SolutionContext(
            raw_input=raw_input,
            part=part,
            step_callback=record,
            max_steps=max_steps
        )
        solution = self.solve(context)
        solution.steps = steps
        return solution
