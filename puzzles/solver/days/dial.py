"""
Dial Solver - Day 1: Secret Entrance.

A dial numbered 0-99 starts at 50 and is turned by a list of
rotations such as ``L68`` or ``R14``. Part 1 counts rotations that
leave the dial on 0; Part 2 counts every time the dial passes through
or lands on 0, computed per rotation instead of clicking step by step.
"""

import logging
from dataclasses import dataclass
from typing import List

from ..base import DaySolver
from ..context import SolutionContext
from ..errors import PuzzleInputError
from ..factory import register_solver
from ..parsing import numbered_lines, parse_int

logger = logging.getLogger(__name__)

DIAL_SIZE = 100
START_POSITION = 50


@dataclass(frozen=True)
class Instruction:
    """
    One dial rotation.

    Attributes:
        direction: 'L' (toward lower numbers) or 'R' (toward higher numbers)
        distance: Number of clicks, >= 0
    """
    direction: str
    distance: int

    def apply(self, position: int) -> int:
        """Position after this rotation, normalized to [0, DIAL_SIZE)."""
        if self.direction == "L":
            return (position - self.distance) % DIAL_SIZE
        return (position + self.distance) % DIAL_SIZE

    def zero_crossings(self, position: int) -> int:
        """
        Times the dial points at 0 during this rotation from position.

        Turning left from P reaches 0 after P clicks and every
        DIAL_SIZE clicks after that; from 0 itself the first hit is a
        full turn away. Turning right reaches 0 after DIAL_SIZE - P clicks.
        """
        if self.direction == "L":
            if position == 0:
                return self.distance // DIAL_SIZE
            return (self.distance - position + DIAL_SIZE) // DIAL_SIZE
        return (self.distance + position) // DIAL_SIZE

    def __str__(self) -> str:
        return f"{self.direction}{self.distance}"


def parse_instructions(text: str) -> List[Instruction]:
    """
    Parse one rotation per line, skipping blank lines.

    Raises:
        PuzzleInputError: On an unknown direction or bad distance
    """
    instructions = []
    for line_number, line in numbered_lines(text):
        token = line.strip()
        direction = token[0]
        if direction not in ("L", "R"):
            raise PuzzleInputError(
                f"Rotation must start with L or R, got {direction!r}",
                line_number, line
            )
        distance = parse_int(token[1:], "rotation distance", line_number, line)
        instructions.append(Instruction(direction, distance))
    return instructions


def render_dial(position: int, instruction: Instruction) -> List[str]:
    """Draw a small dial face with the current position."""
    left = (position - 1) % DIAL_SIZE
    right = (position + 1) % DIAL_SIZE
    return [
        "      .-------.",
        f"     /   {position:02d}    \\",
        f"    | {left:02d}  ^  {right:02d} |",
        "     \\         /",
        "      '-------'",
        f"  Last turn: {instruction}",
    ]


@register_solver
class DialSolver(DaySolver):
    """
    Modular rotation counter for a 100-position dial.
    """
    day = 1
    title = "Secret Entrance"
    description = "Dial rotations mod 100 - count stops on and passes through 0"

    def solve_part1(self, context: SolutionContext) -> int:
        instructions = parse_instructions(context.text)
        logger.debug(f"Parsed {len(instructions)} rotations")

        position = START_POSITION
        zero_count = 0

        for instruction in instructions:
            position = instruction.apply(position)
            if position == 0:
                zero_count += 1

            if context.animated:
                context.report_step(
                    f"Turn {instruction} -> {position}",
                    render_dial(position, instruction),
                    zero_count
                )

        return zero_count

    def solve_part2(self, context: SolutionContext) -> int:
        instructions = parse_instructions(context.text)
        logger.debug(f"Parsed {len(instructions)} rotations")

        position = START_POSITION
        zero_count = 0

        for instruction in instructions:
            crossings = instruction.zero_crossings(position)
            zero_count += crossings
            position = instruction.apply(position)

            if context.animated:
                context.report_step(
                    f"Turn {instruction} passes 0 x{crossings}",
                    render_dial(position, instruction),
                    zero_count
                )

        return zero_count
