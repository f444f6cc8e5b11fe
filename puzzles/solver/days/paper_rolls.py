"""
Grid Accessibility Solver - Day 4: Printing Department.

Paper rolls (``@``) sit on a grid. A forklift can reach a roll when
fewer than 4 of its 8 neighbors are rolls. Part 1 counts reachable
rolls; Part 2 keeps removing every reachable roll, round after round,
until none can be reached, and counts everything removed.

Neighbor counts are computed for the whole grid at once by summing
eight shifted copies of a zero-padded roll mask.
"""

import logging
from typing import List

import numpy as np

from ..base import DaySolver
from ..context import SolutionContext
from ..factory import register_solver
from ..grid import Grid

logger = logging.getLogger(__name__)

ROLL = "@"
REMOVED = "x"
MAX_NEIGHBORS = 4

NEIGHBOR_OFFSETS = [
    (dr, dc)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if (dr, dc) != (0, 0)
]


def neighbor_counts(rolls: np.ndarray) -> np.ndarray:
    """
    Count roll neighbors (8 directions) for every cell.

    Cells outside the grid count as empty.

    Args:
        rolls: 2-D boolean roll mask

    Returns:
        Integer array of the same shape
    """
    rows, cols = rolls.shape
    padded = np.pad(rolls.astype(np.int32), 1)
    counts = np.zeros((rows, cols), dtype=np.int32)
    for dr, dc in NEIGHBOR_OFFSETS:
        counts += padded[1 + dr:1 + dr + rows, 1 + dc:1 + dc + cols]
    return counts


def accessible(rolls: np.ndarray) -> np.ndarray:
    """Mask of rolls with fewer than MAX_NEIGHBORS roll neighbors."""
    return rolls & (neighbor_counts(rolls) < MAX_NEIGHBORS)


def render_rolls(rolls: np.ndarray, removed: np.ndarray, max_rows: int = 20, max_cols: int = 60) -> List[str]:
    """Grid with remaining rolls as '@' and this round's removals as 'x'."""
    lines = []
    for r in range(min(rolls.shape[0], max_rows)):
        row = []
        for c in range(min(rolls.shape[1], max_cols)):
            if removed[r, c]:
                row.append(REMOVED)
            elif rolls[r, c]:
                row.append(ROLL)
            else:
                row.append(".")
        lines.append("".join(row))
    return lines


@register_solver
class GridAccessibilitySolver(DaySolver):
    """
    Neighbor-count accessibility check and removal simulation.
    """
    day = 4
    title = "Printing Department"
    description = "8-neighbor counts; remove accessible rolls until stable"

    def solve_part1(self, context: SolutionContext) -> int:
        grid = Grid.from_lines(context.lines)
        if grid.is_empty:
            return 0

        rolls = grid.mask(ROLL)
        reachable = accessible(rolls)
        count = int(reachable.sum())

        if context.animated:
            context.report_step(
                f"{count} of {int(rolls.sum())} rolls are accessible",
                render_rolls(rolls & ~reachable, reachable),
                count
            )

        return count

    def solve_part2(self, context: SolutionContext) -> int:
        grid = Grid.from_lines(context.lines)
        if grid.is_empty:
            return 0

        rolls = grid.mask(ROLL)
        total_removed = 0
        round_number = 0

        while True:
            # All removals in a round use the grid as it was at the start
            to_remove = accessible(rolls)
            removed = int(to_remove.sum())
            if removed == 0:
                break

            rolls = rolls & ~to_remove
            total_removed += removed
            round_number += 1
            logger.debug(f"Round {round_number}: removed {removed} rolls")

            if context.animated:
                context.report_step(
                    f"Round {round_number}: removed {removed} rolls",
                    render_rolls(rolls, to_remove),
                    total_removed
                )

        return total_removed
