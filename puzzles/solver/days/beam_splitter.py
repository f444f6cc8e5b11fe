"""
Beam Split Solver - Day 7: Laboratories.

A tachyon beam enters at ``S`` and moves down one row at a time. A
splitter ``^`` stops the beam and emits two new beams from its left
and right sides. Every other character lets the beam through.

Part 1 counts split events over the set of distinct beam columns
(beams landing on the same column merge). Part 2 counts timelines:
each column carries the number of distinct paths that reach it, and a
splitter sends that whole count both ways.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..base import DaySolver
from ..context import SolutionContext
from ..errors import PuzzleInputError
from ..factory import register_solver
from ..grid import Grid

logger = logging.getLogger(__name__)

START = "S"
SPLITTER = "^"
BEAM = "|"


def find_start(grid: Grid) -> Optional[Tuple[int, int]]:
    """
    Position of the single start cell.

    Returns:
        (row, col), or None if the grid has no start

    Raises:
        PuzzleInputError: If there is more than one start
    """
    starts = grid.find(START)
    if len(starts) > 1:
        row, col = starts[1]
        raise PuzzleInputError(f"Grid has a second start 'S' at row {row}, column {col}")
    return starts[0] if starts else None


def render_beams(grid: Grid, row: int, columns: Iterable[int], window: int = 12) -> List[str]:
    """Rows up to and including row, with the current beams drawn on it."""
    first = max(0, row - window + 1)
    lines = grid.render()[first:row + 1]
    current = list(lines[-1])
    for col in columns:
        if current[col] != SPLITTER:
            current[col] = BEAM
    lines[-1] = "".join(current)
    return lines


@register_solver
class BeamSplitSolver(DaySolver):
    """
    Row-by-row simulation of a splitting beam.
    """
    day = 7
    title = "Laboratories"
    description = "Split beams at '^'; count splits, then count timelines"

    def solve_part1(self, context: SolutionContext) -> int:
        grid = Grid.from_lines(context.lines)
        start = find_start(grid)
        if start is None:
            return 0

        start_row, start_col = start
        width = grid.width
        beams: Set[int] = {start_col}
        split_count = 0

        for row in range(start_row + 1, grid.height):
            next_beams: Set[int] = set()
            for col in beams:
                if grid.get_cell(row, col) == SPLITTER:
                    split_count += 1
                    if col - 1 >= 0:
                        next_beams.add(col - 1)
                    if col + 1 < width:
                        next_beams.add(col + 1)
                else:
                    next_beams.add(col)
            beams = next_beams

            if context.animated:
                context.report_step(
                    f"Row {row}: {len(beams)} beams, {split_count} splits",
                    render_beams(grid, row, beams),
                    split_count
                )

            if not beams:
                break

        return split_count

    def solve_part2(self, context: SolutionContext) -> int:
        grid = Grid.from_lines(context.lines)
        start = find_start(grid)
        if start is None:
            return 0

        start_row, start_col = start
        width = grid.width
        timelines: Dict[int, int] = {start_col: 1}

        for row in range(start_row + 1, grid.height):
            next_timelines: Dict[int, int] = defaultdict(int)
            for col, count in timelines.items():
                if grid.get_cell(row, col) == SPLITTER:
                    if col - 1 >= 0:
                        next_timelines[col - 1] += count
                    if col + 1 < width:
                        next_timelines[col + 1] += count
                else:
                    next_timelines[col] += count
            timelines = dict(next_timelines)

            if context.animated:
                context.report_step(
                    f"Row {row}: {sum(timelines.values())} timelines",
                    render_beams(grid, row, timelines),
                    sum(timelines.values())
                )

            if not timelines:
                break

        logger.debug(f"Timelines end in {len(timelines)} columns")
        return sum(timelines.values())
