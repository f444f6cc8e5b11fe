"""
Solution Context Module - Shared context for one solver run.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from .parsing import RawInput, to_text

# on_step(description, visualization_lines, current_value)
StepCallback = Callable[[str, List[str], int], None]

DEFAULT_MAX_STEPS = 200


@dataclass
class SolutionContext:
    """
    Context passed to solvers containing the raw input, the part being
    solved and the optional animation step callback.

    Attributes:
        raw_input: Puzzle input (text blob or list of lines)
        part: Which part to solve (1 or 2)
        step_callback: Optional callback receiving progress snapshots
        max_steps: Intermediate steps delivered before further ones are dropped
        steps_reported: Steps delivered so far
        steps_dropped: Steps skipped because max_steps was reached
        text: Input normalized to a single text blob
    """
    raw_input: RawInput
    part: int = 1
    step_callback: Optional[StepCallback] = None
    max_steps: int = DEFAULT_MAX_STEPS
    steps_reported: int = field(default=0, init=False)
    steps_dropped: int = field(default=0, init=False)
    text: str = field(default="", init=False)

    def __post_init__(self):
        if self.part not in (1, 2):
            raise ValueError(f"Part must be 1 or 2, got {self.part}")
        self.text = to_text(self.raw_input)

    @property
    def lines(self) -> List[str]:
        """Input split into lines (blank lines kept)."""
        return self.text.splitlines()

    @property
    def animated(self) -> bool:
        """
        True if a step callback is attached.

        Solvers check this before building visualization lines so the
        plain variant does no rendering work.
        """
        return self.step_callback is not None

    def report_step(
        self,
        description: str,
        lines: Iterable[str] = (),
        value: int = 0,
        final: bool = False
    ) -> None:
        """
        Report a progress snapshot to the callback.

        Intermediate steps beyond max_steps are dropped; final steps
        are always delivered.

        Args:
            description: Short caption
            lines: Visualization lines
            value: Current running value
            final: True for the closing answer step
        """
        if self.step_callback is None:
            return
        if not final and self.steps_reported >= self.max_steps:
            self.steps_dropped += 1
            return
        self.steps_reported += 1
        self.step_callback(description, list(lines), value)
