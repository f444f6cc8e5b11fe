"""
Range Merge Solver - Day 5: Cafeteria.

Input is a block of "fresh" ID ranges, a blank line, then a block of
ingredient IDs. Part 1 counts the IDs that are fresh; Part 2 counts
every ID covered by the ranges.

Ranges are merged first (sorted by start, overlapping or touching
ranges coalesced), so membership is a binary search and coverage is a
plain sum of sizes.
"""

import logging
from bisect import bisect_right
from typing import List, Sequence, Tuple

from ..base import DaySolver
from ..context import SolutionContext
from ..errors import PuzzleInputError
from ..factory import register_solver
from ..interval import Range
from ..parsing import parse_int, parse_range, split_blocks

logger = logging.getLogger(__name__)


def parse_inventory(text: str) -> Tuple[List[Range], List[int]]:
    """
    Parse the range block and the ID block.

    Returns:
        (ranges, ids); ids is empty when the ID block is missing

    Raises:
        PuzzleInputError: On malformed lines or more than two blocks
    """
    blocks = split_blocks(text)
    if not blocks:
        return [], []
    if len(blocks) > 2:
        line_number, line = blocks[2][0]
        raise PuzzleInputError("Expected a range block and an ID block only", line_number, line)

    ranges = [parse_range(line, line_number, line) for line_number, line in blocks[0]]
    ids = []
    if len(blocks) == 2:
        ids = [parse_int(line, "ingredient ID", line_number, line) for line_number, line in blocks[1]]
    return ranges, ids


def merge_ranges(ranges: Sequence[Range]) -> List[Range]:
    """
    Merge overlapping and adjacent ranges.

    [3-5], [10-14], [12-18], [19-20] -> [3-5], [10-20]

    Returns:
        Sorted list of disjoint, non-touching ranges
    """
    merged: List[Range] = []
    for current in sorted(ranges):
        if merged and current.start <= merged[-1].end + 1:
            last = merged[-1]
            merged[-1] = Range(last.start, max(last.end, current.end))
        else:
            merged.append(current)
    return merged


def is_in_ranges(value: int, merged: Sequence[Range]) -> bool:
    """
    Check membership against merged ranges in O(log m).

    Finds the rightmost range whose start <= value and checks its end.

    Args:
        value: ID to look up
        merged: Output of merge_ranges()
    """
    index = bisect_right(merged, value, key=lambda r: r.start) - 1
    return index >= 0 and value <= merged[index].end


def render_ranges(merged: Sequence[Range], limit: int = 12) -> List[str]:
    lines = [f"{len(merged)} merged ranges:"]
    lines.extend(f"  [{r}] size {r.size}" for r in merged[:limit])
    if len(merged) > limit:
        lines.append(f"  ... and {len(merged) - limit} more")
    return lines


@register_solver
class RangeMergeSolver(DaySolver):
    """
    Interval merging with binary-search membership queries.
    """
    day = 5
    title = "Cafeteria"
    description = "Merge fresh ranges; binary-search ID lookups"

    def solve_part1(self, context: SolutionContext) -> int:
        ranges, ids = parse_inventory(context.text)
        merged = merge_ranges(ranges)
        logger.debug(f"Merged {len(ranges)} ranges into {len(merged)}")

        if context.animated:
            context.report_step("Merged fresh ranges", render_ranges(merged), 0)

        fresh = 0
        for ingredient in ids:
            found = is_in_ranges(ingredient, merged)
            if found:
                fresh += 1
            if context.animated:
                context.report_step(
                    f"ID {ingredient} is {'fresh' if found else 'spoiled'}",
                    [f"Fresh so far: {fresh}"],
                    fresh
                )

        return fresh

    def solve_part2(self, context: SolutionContext) -> int:
        ranges, _ = parse_inventory(context.text)
        merged = merge_ranges(ranges)
        logger.debug(f"Merged {len(ranges)} ranges into {len(merged)}")

        covered = 0
        for merged_range in merged:
            covered += merged_range.size
            if context.animated:
                context.report_step(
                    f"Range {merged_range} covers {merged_range.size} IDs",
                    render_ranges(merged),
                    covered
                )

        return covered
