"""
Battery Selector - Day 3: Lobby.

Each line is a bank of batteries (digits). Turning on exactly k of
them, in their original order, produces a k-digit joltage; the goal is
the largest possible joltage per bank.

Greedy: for each of the k result positions, pick the largest digit
that still leaves enough digits after it to fill the remaining
positions. Equal digits resolve to the earliest one, which keeps the
widest window for the picks that follow.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..base import DaySolver
from ..context import SolutionContext
from ..errors import PuzzleInputError
from ..factory import register_solver
from ..parsing import numbered_lines, parse_int

logger = logging.getLogger(__name__)

PART1_K = 2
PART2_K = 12


@dataclass(frozen=True)
class Bank:
    """
    One bank of batteries.

    Attributes:
        digits: Digit string in original order
        part1_k: Selection count for Part 1, if given in the input
        part2_k: Selection count for Part 2, if given in the input
    """
    digits: str
    part1_k: Optional[int] = None
    part2_k: Optional[int] = None

    def k_for(self, part: int) -> int:
        """Selection count for a part, falling back to the defaults."""
        if part == 1:
            return self.part1_k if self.part1_k is not None else PART1_K
        return self.part2_k if self.part2_k is not None else PART2_K


def parse_banks(text: str) -> List[Bank]:
    """
    Parse banks, one per line: ``digits [k1 [k2]]``.

    Raises:
        PuzzleInputError: On non-digit banks, bad counts or extra fields
    """
    banks = []
    for line_number, line in numbered_lines(text):
        fields = line.split()
        digits = fields[0]
        if not digits.isascii() or not digits.isdigit():
            raise PuzzleInputError(f"Bank must be digits, got {digits!r}", line_number, line)
        if len(fields) > 3:
            raise PuzzleInputError("Expected 'digits [k1 [k2]]'", line_number, line)

        counts = [parse_int(field, "selection count", line_number, line) for field in fields[1:]]
        if any(k == 0 for k in counts):
            raise PuzzleInputError("Selection count must be at least 1", line_number, line)

        banks.append(Bank(
            digits=digits,
            part1_k=counts[0] if len(counts) > 0 else None,
            part2_k=counts[1] if len(counts) > 1 else None
        ))
    return banks


def select_positions(bank: str, k: int) -> List[int]:
    """
    Positions of the digits forming the largest k-digit subsequence.

    Pick i (0-based) searches positions [start, n - (k - i)], leaving
    k - i - 1 digits after it.

    Returns:
        Increasing list of bank indexes (the whole bank if k >= len(bank))
    """
    n = len(bank)
    if k >= n:
        return list(range(n))

    positions = []
    start = 0
    for i in range(k):
        last = n - (k - i)
        best = start
        for j in range(start + 1, last + 1):
            if bank[j] > bank[best]:
                best = j
                if bank[best] == "9":
                    break
        positions.append(best)
        start = best + 1
    return positions


def max_selection(bank: str, k: int) -> int:
    """
    Largest number formed by k digits of bank taken in order.

    Args:
        bank: Digit string
        k: Number of digits to select (>= 1)

    Returns:
        Selected digits as an integer (0 for an empty bank)
    """
    return selection_value(bank, select_positions(bank, k))


def selection_value(bank: str, positions: List[int]) -> int:
    """Digits at positions read as one integer (0 if none)."""
    if not positions:
        return 0
    return int("".join(bank[p] for p in positions))


def render_bank(bank: str, positions: List[int], width: int = 60) -> List[str]:
    """Bank digits with selected positions marked underneath."""
    shown = bank[:width]
    chosen = set(positions)
    marks = "".join("^" if i in chosen else " " for i in range(len(shown)))
    suffix = "..." if len(bank) > width else ""
    return [
        "+" + "-" * (len(shown) + 2) + "+",
        f"| {shown} |{suffix}",
        "+" + "-" * (len(shown) + 2) + "+",
        f"  {marks}",
    ]


@register_solver
class BatterySelector(DaySolver):
    """
    Sums the maximum k-digit joltage of every bank.
    """
    day = 3
    title = "Lobby"
    description = "Greedy ordered digit selection (k=2, then k=12)"

    def solve_part1(self, context: SolutionContext) -> int:
        return self._total_joltage(context)

    def solve_part2(self, context: SolutionContext) -> int:
        return self._total_joltage(context)

    def _total_joltage(self, context: SolutionContext) -> int:
        banks = parse_banks(context.text)
        logger.debug(f"Parsed {len(banks)} banks")

        total = 0
        for bank in banks:
            k = bank.k_for(context.part)
            if context.animated:
                positions = select_positions(bank.digits, k)
                joltage = selection_value(bank.digits, positions)
                total += joltage
                context.report_step(
                    f"Selected {min(k, len(bank.digits))} digits: {joltage}",
                    render_bank(bank.digits, positions),
                    total
                )
            else:
                total += max_selection(bank.digits, k)

        return total
