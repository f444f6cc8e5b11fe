"""
Tests for the daily solvers

Each day is checked against its worked example, the edge cases of its
input format, and (for Days 2 and 3) a brute-force oracle on small
inputs.

Usage:
    pytest tests/test_days.py
"""

import sys
from itertools import combinations
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from puzzles.solver import Grid, PuzzleInputError, Range, create_solver
from puzzles.solver.days.dial import DIAL_SIZE, Instruction, parse_instructions
from puzzles.solver.days.pattern_ranges import (
    doubled_patterns,
    parse_ranges,
    repeated_patterns,
    repetition_factor,
)
from puzzles.solver.days.batteries import (
    max_selection,
    parse_banks,
    select_positions,
    selection_value,
)
from puzzles.solver.days.paper_rolls import accessible, neighbor_counts
from puzzles.solver.days.fresh_ranges import is_in_ranges, merge_ranges, parse_inventory
from puzzles.solver.days.worksheet import Worksheet
from puzzles.solver.days.beam_splitter import find_start

from test_solver import SAMPLE_INPUTS


# --- Day 1: Secret Entrance -------------------------------------------------

def test_dial_example():
    assert create_solver(1).solve_both(SAMPLE_INPUTS[1]) == (3, 6)


def test_dial_full_turns_right():
    """R1000 from 50 passes 0 ten times."""
    solver = create_solver(1)
    assert solver.part2("R1000") == 10
    assert solver.part1("R1000") == 0


def test_dial_left_from_zero():
    """Leaving 0 to the left only counts full turns."""
    solver = create_solver(1)
    # 50 -> 0 (one hit), then L100 from 0 is one full turn
    assert solver.part2("L50\nL100\n") == 2
    assert solver.part1("L50\nL100\n") == 2
    assert solver.part2("L50\nL99\n") == 1


def test_dial_positions_stay_on_face():
    instructions = parse_instructions("L999\nR12345\nL0\nR99\nL1\n")
    position = 50
    for instruction in instructions:
        position = instruction.apply(position)
        assert 0 <= position < DIAL_SIZE


def test_dial_crossings_match_click_simulation():
    """Closed-form crossings equal clicking one step at a time."""
    for start in (0, 1, 50, 99):
        for direction in ("L", "R"):
            for distance in (0, 1, 99, 100, 101, 250):
                step = -1 if direction == "L" else 1
                position, hits = start, 0
                for _ in range(distance):
                    position = (position + step) % DIAL_SIZE
                    if position == 0:
                        hits += 1
                assert Instruction(direction, distance).zero_crossings(start) == hits


def test_dial_rejects_bad_direction():
    with pytest.raises(PuzzleInputError, match="line 2"):
        create_solver(1).part1("L5\nX10\n")
    with pytest.raises(PuzzleInputError):
        create_solver(1).part1("Rten\n")


# --- Day 2: Gift Shop -------------------------------------------------------

def _is_doubled(n: int) -> bool:
    s = str(n)
    half = len(s) // 2
    return len(s) % 2 == 0 and s[:half] == s[half:]


def _is_repeated(n: int) -> bool:
    s = str(n)
    return any(
        len(s) % p == 0 and len(s) // p >= 2 and s[:p] * (len(s) // p) == s
        for p in range(1, len(s) // 2 + 1)
    )


def test_pattern_example():
    assert create_solver(2).solve_both(SAMPLE_INPUTS[2]) == (1227775554, 4174379265)


def test_doubled_two_digit_span():
    assert sorted(doubled_patterns(Range(10, 99))) == [11, 22, 33, 44, 55, 66, 77, 88, 99]
    assert create_solver(2).part1("10-99") == 495


@pytest.mark.parametrize("start,end", [
    (1, 200), (95, 115), (998, 1012), (1000, 9999), (5, 5), (0, 11), (1100, 11000),
])
def test_patterns_match_brute_force(start, end):
    """Algebraic generation finds exactly the brute-force sets."""
    numbers = range(start, end + 1)
    assert set(doubled_patterns(Range(start, end))) == {n for n in numbers if _is_doubled(n)}
    assert repeated_patterns(Range(start, end)) == {n for n in numbers if _is_repeated(n)}


def test_overlapping_ranges_count_once():
    solver = create_solver(2)
    assert solver.part1("10-30,20-40") == 11 + 22 + 33
    assert solver.part2("100-120,110-130") == 111


def test_repetition_factor():
    assert repetition_factor(2, 3) == 10101
    assert repetition_factor(1, 4) == 1111
    assert repetition_factor(3, 2) == 1001


def test_large_range_is_fast():
    """A billion-wide range is handled without scanning it."""
    found = repeated_patterns(Range(1, 10 ** 9))
    assert 123123123 in found
    assert 999999999 in found


def test_parse_ranges_rejects_garbage():
    assert parse_ranges("1-2,\n3-4,") == [Range(1, 2), Range(3, 4)]
    with pytest.raises(PuzzleInputError):
        parse_ranges("1-2,34")
    with pytest.raises(PuzzleInputError, match="greater than end"):
        parse_ranges("9-3")


# --- Day 3: Lobby -----------------------------------------------------------

def test_battery_example():
    assert create_solver(3).solve_both(SAMPLE_INPUTS[3]) == (357, 3121910778619)


def test_battery_descending_bank():
    assert max_selection("987654321", 2) == 98


def test_battery_whole_bank_when_k_too_large():
    assert max_selection("5172", 4) == 5172
    assert max_selection("5172", 9) == 5172
    assert select_positions("5172", 9) == [0, 1, 2, 3]


def test_battery_ties_take_earliest():
    assert select_positions("9919", 2) == [0, 1]
    assert max_selection("9919", 3) == 999


@pytest.mark.parametrize("bank", ["31415926", "2718281828", "11111", "123454321", "9081726354"])
@pytest.mark.parametrize("k", [1, 2, 3, 5])
def test_battery_matches_brute_force(bank, k):
    """Greedy choice beats every other ordered k-subsequence."""
    k = min(k, len(bank))
    best = max(int("".join(c)) for c in combinations(bank, k))
    result = max_selection(bank, k)
    assert result == best
    assert len(str(result)) == k


def test_battery_counts_embedded_in_input():
    banks = parse_banks("12345 2 3\n987\n")
    assert banks[0].k_for(1) == 2
    assert banks[0].k_for(2) == 3
    assert banks[1].k_for(1) == 2
    assert banks[1].k_for(2) == 12

    solver = create_solver(3)
    assert solver.part1("818181911112111 3") == 921
    assert solver.part2("818181911112111 3 4") == 9211


def test_battery_selection_value():
    assert selection_value("5172", [1, 3]) == 12
    assert selection_value("5172", []) == 0
    assert selection_value("", select_positions("", 2)) == 0


def test_battery_animated_steps_report_joltage():
    """Each animated step carries the running total of bank joltages."""
    solution = create_solver(3).animate("12345 2 3\n987\n", 2)
    values = [step.value for step in solution.steps]
    assert values == [345, 345 + 987, 345 + 987]
    assert solution.answer == create_solver(3).part2("12345 2 3\n987\n")


def test_battery_rejects_bad_lines():
    with pytest.raises(PuzzleInputError):
        parse_banks("12a45\n")
    with pytest.raises(PuzzleInputError):
        parse_banks("12345 0\n")
    with pytest.raises(PuzzleInputError):
        parse_banks("12345 1 2 3\n")


# --- Day 4: Printing Department ---------------------------------------------

def test_rolls_example():
    assert create_solver(4).solve_both(SAMPLE_INPUTS[4]) == (13, 43)


def test_rolls_full_square():
    """In a 3x3 block only the corners start accessible."""
    rolls = np.ones((3, 3), dtype=bool)
    counts = neighbor_counts(rolls)
    assert counts[1, 1] == 8
    assert counts[0, 0] == 3
    assert counts[0, 1] == 5
    assert int(accessible(rolls).sum()) == 4

    solver = create_solver(4)
    assert solver.part1("@@@\n@@@\n@@@\n") == 4
    # corners, then edges, then the center
    assert solver.part2("@@@\n@@@\n@@@\n") == 9


def test_rolls_removal_bounded_by_initial_count():
    grid = "@@@@@\n@@@@@\n@@@@@\n@@@@@\n@@@@@\n"
    removed = create_solver(4).part2(grid)
    assert 0 < removed <= grid.count("@")


def test_rolls_ragged_rows():
    # the left cell of the short middle row has 4 neighbors
    assert create_solver(4).part1("@@@@\n@\n@@\n") == 6


# --- Day 5: Cafeteria -------------------------------------------------------

def test_fresh_example():
    assert create_solver(5).solve_both(SAMPLE_INPUTS[5]) == (3, 14)


def test_merge_ranges():
    merged = merge_ranges([Range(3, 5), Range(10, 14), Range(12, 18)])
    assert merged == [Range(3, 5), Range(10, 18)]
    assert is_in_ranges(17, merged)
    assert not is_in_ranges(7, merged)
    assert sum(r.size for r in merged) == 12


def test_merge_touching_ranges():
    assert merge_ranges([Range(6, 9), Range(1, 5)]) == [Range(1, 9)]
    assert merge_ranges([Range(1, 5), Range(7, 9)]) == [Range(1, 5), Range(7, 9)]
    assert merge_ranges([]) == []


def test_is_in_ranges_edges():
    merged = [Range(3, 5), Range(10, 18)]
    assert not is_in_ranges(2, merged)
    assert is_in_ranges(3, merged)
    assert is_in_ranges(5, merged)
    assert not is_in_ranges(6, merged)
    assert is_in_ranges(18, merged)
    assert not is_in_ranges(19, merged)
    assert not is_in_ranges(4, [])


def test_fresh_without_id_block():
    solver = create_solver(5)
    assert solver.solve_both("3-5\n10-14\n") == (0, 8)


def test_fresh_rejects_bad_input():
    with pytest.raises(PuzzleInputError, match="line 4"):
        parse_inventory("3-5\n10-14\n\nabc\n")
    with pytest.raises(PuzzleInputError):
        parse_inventory("3-5\n\n1\n\n2\n")


# --- Day 6: Trash Compactor -------------------------------------------------

def test_worksheet_example():
    assert create_solver(6).solve_both(SAMPLE_INPUTS[6]) == (4277556, 3263827)


def test_worksheet_blocks_and_operands():
    worksheet = Worksheet.parse(SAMPLE_INPUTS[6])
    assert worksheet.column_blocks() == [(0, 2), (4, 6), (8, 10), (12, 14)]
    assert worksheet.row_operands(0, 2) == (123, 45, 6)
    assert worksheet.column_operands(0, 2) == (1, 24, 356)
    assert worksheet.operator_for(4, 6) == "+"


def test_worksheet_large_product():
    """Products beyond 64 bits stay exact."""
    text = "99999999999\n99999999999\n99999999999\n*          \n"
    assert create_solver(6).part1(text) == 99999999999 ** 3


def test_worksheet_short_operator_row():
    assert create_solver(6).part1("12 34\n4  5\n+  *\n") == 16 + 34 * 5


def test_worksheet_row_slice_with_gap_is_skipped():
    """A row slice holding two numbers adds no operand in Part 1."""
    text = "12 34\n12345\n+    \n"
    solver = create_solver(6)
    assert Worksheet.parse(text).row_operands(0, 4) == (12345,)
    assert solver.part1(text) == 12345
    # columns: 11 + 22 + 3 + 34 + 45
    assert solver.part2(text) == 115


def test_worksheet_missing_operator():
    with pytest.raises(PuzzleInputError, match="No operator"):
        create_solver(6).part1("12 3\n4  5\n+  ?\n")


def test_worksheet_rejects_bad_rows():
    with pytest.raises(PuzzleInputError):
        create_solver(6).part1("1x\n+\n")
    with pytest.raises(PuzzleInputError):
        create_solver(6).part1("+\n")


# --- Day 7: Laboratories ----------------------------------------------------

def test_beam_example():
    """The 16-row example gives 21 splits and 40 timelines."""
    assert create_solver(7).solve_both(SAMPLE_INPUTS[7]) == (21, 40)


def test_beam_merging_versus_timelines():
    grid = "..S..\n..^..\n.^.^.\n.....\n"
    solver = create_solver(7)
    # splits: row 1 once, row 2 twice
    assert solver.part1(grid) == 3
    # paths: LL, LR, RL, RR
    assert solver.part2(grid) == 4


def test_beam_edges_drop_out_of_bounds():
    grid = "S..\n^..\n"
    solver = create_solver(7)
    assert solver.part1(grid) == 1
    assert solver.part2(grid) == 1


def test_beam_start_not_on_first_row():
    grid = "...\n.S.\n.^.\n"
    assert create_solver(7).solve_both(grid) == (1, 2)


def test_beam_without_start():
    assert create_solver(7).solve_both("...\n.^.\n") == (0, 0)


def test_beam_rejects_two_starts():
    with pytest.raises(PuzzleInputError, match="second start"):
        create_solver(7).part1("S.S\n...\n")
    with pytest.raises(PuzzleInputError):
        find_start(Grid.from_lines(["S", "S"]))
