"""
Pattern Range Solver - Day 2: Gift Shop.

Finds "invalid" product IDs inside numeric ranges: numbers made of a
digit pattern repeated exactly twice (Part 1, e.g. 6464) or at least
twice (Part 2, e.g. 121212).

Instead of checking every number in a range, repeated-pattern numbers
are generated directly. A pattern p of length k repeated r times equals
p * (1 + 10^k + 10^2k + ... + 10^(r-1)k), so for each (k, r) only the
pattern values whose product lands inside the range are enumerated.
"""

import logging
from typing import Iterator, List, Set

from ..base import DaySolver
from ..context import SolutionContext
from ..factory import register_solver
from ..interval import Range
from ..parsing import parse_range

logger = logging.getLogger(__name__)


def parse_ranges(text: str) -> List[Range]:
    """
    Parse comma-separated ``start-end`` ranges.

    Newlines are treated like whitespace so wrapped input still parses.
    """
    ranges = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        for token in line.split(","):
            if token.strip():
                ranges.append(parse_range(token, line_number, line))
    return ranges


def digit_count(n: int) -> int:
    """Number of decimal digits in a non-negative integer (0 has one)."""
    return len(str(n))


def repetition_factor(pattern_length: int, repetitions: int) -> int:
    """
    Multiplier that repeats a pattern.

    For a 2-digit pattern repeated 3 times: ababab = ab * 10101.
    """
    base = 10 ** pattern_length
    return sum(base ** i for i in range(repetitions))


def _pattern_window(lo: int, hi: int, pattern_length: int, factor: int) -> range:
    """
    Pattern values v with no leading zero such that lo <= v * factor <= hi.
    """
    min_pattern = 1 if pattern_length == 1 else 10 ** (pattern_length - 1)
    max_pattern = 10 ** pattern_length - 1
    first = max(min_pattern, -(-lo // factor))
    last = min(max_pattern, hi // factor)
    return range(first, last + 1)


def doubled_patterns(id_range: Range) -> Iterator[int]:
    """
    Yield numbers in the range formed by writing a pattern twice.

    Half lengths start at ceil(digits(start) / 2) and grow until the
    smallest doubled number of that length passes the range end.
    """
    half_length = (digit_count(id_range.start) + 1) // 2
    while True:
        factor = 10 ** half_length + 1
        min_half = 1 if half_length == 1 else 10 ** (half_length - 1)
        if min_half * factor > id_range.end:
            break

        for half in _pattern_window(id_range.start, id_range.end, half_length, factor):
            yield half * factor

        half_length += 1


def repeated_patterns(id_range: Range) -> Set[int]:
    """
    Numbers in the range formed by writing a pattern two or more times.

    Each total digit length is handled separately, with the range
    clamped to numbers of exactly that length. Different pattern
    lengths can produce the same number (1111 = 1x4 = 11x2), hence
    the set.
    """
    patterns: Set[int] = set()

    for total_digits in range(digit_count(id_range.start), digit_count(id_range.end) + 1):
        min_with_digits = 1 if total_digits == 1 else 10 ** (total_digits - 1)
        lo = max(id_range.start, min_with_digits)
        hi = min(id_range.end, 10 ** total_digits - 1)
        if lo > hi:
            continue

        for pattern_length in range(1, total_digits // 2 + 1):
            if total_digits % pattern_length:
                continue
            repetitions = total_digits // pattern_length
            factor = repetition_factor(pattern_length, repetitions)
            for pattern in _pattern_window(lo, hi, pattern_length, factor):
                patterns.add(pattern * factor)

    return patterns


def _render_found(id_range: Range, found: Set[int], limit: int = 8) -> List[str]:
    shown = sorted(found)[:limit]
    lines = [f"Range {id_range}: {len(found)} invalid IDs"]
    lines.extend(f"  * {value}" for value in shown)
    if len(found) > limit:
        lines.append(f"  ... and {len(found) - limit} more")
    return lines


@register_solver
class PatternRangeSolver(DaySolver):
    """
    Sums repeated-digit-pattern numbers across a set of ranges.

    Overlapping ranges are deduplicated: each invalid ID counts once.
    """
    day = 2
    title = "Gift Shop"
    description = "Generate repeated-digit patterns inside ranges algebraically"

    def solve_part1(self, context: SolutionContext) -> int:
        return self._sum_invalid(context, lambda r: set(doubled_patterns(r)))

    def solve_part2(self, context: SolutionContext) -> int:
        return self._sum_invalid(context, repeated_patterns)

    def _sum_invalid(self, context: SolutionContext, finder) -> int:
        ranges = parse_ranges(context.text)
        logger.debug(f"Parsed {len(ranges)} ranges")

        invalid_ids: Set[int] = set()
        for id_range in ranges:
            found = finder(id_range)
            invalid_ids |= found

            if context.animated:
                context.report_step(
                    f"Scanned range {id_range}",
                    _render_found(id_range, found),
                    sum(invalid_ids)
                )

        logger.debug(f"Found {len(invalid_ids)} distinct invalid IDs")
        return sum(invalid_ids)
