"""
Worksheet Solver - Day 6: Trash Compactor.

A worksheet lays math problems side by side. Each problem is a block
of columns; blocks are separated by columns that are blank on every
line. The last line holds each problem's operator (+ or *).

Part 1 reads each number row of a block as one operand. Part 2 reads
each column of a block top to bottom as one operand.
"""

import logging
from dataclasses import dataclass
from math import prod
from typing import List, Tuple

from ..base import DaySolver
from ..context import SolutionContext
from ..errors import PuzzleInputError
from ..factory import register_solver
from ..parsing import numbered_lines

logger = logging.getLogger(__name__)

ADD = "+"
MULTIPLY = "*"


@dataclass(frozen=True)
class Problem:
    """
    One problem block of the worksheet.

    Attributes:
        col_start: First column of the block (inclusive)
        col_end: Last column of the block (inclusive)
        operator: '+' or '*'
        operands: Operand values in reading order
    """
    col_start: int
    col_end: int
    operator: str
    operands: Tuple[int, ...]

    def evaluate(self) -> int:
        """Sum or product of the operands (empty product is 1)."""
        if self.operator == MULTIPLY:
            return prod(self.operands)
        return sum(self.operands)

    def __str__(self) -> str:
        return f" {self.operator} ".join(str(v) for v in self.operands) + f" = {self.evaluate()}"


@dataclass(frozen=True)
class Worksheet:
    """
    Worksheet lines padded to a common width.

    Attributes:
        number_rows: Operand rows, top to bottom
        operator_row: Last line holding the operators
        line_numbers: Original 1-based line number of each row
    """
    number_rows: Tuple[str, ...]
    operator_row: str
    line_numbers: Tuple[int, ...]

    @classmethod
    def parse(cls, text: str) -> 'Worksheet':
        """
        Split text into number rows and the operator row.

        Raises:
            PuzzleInputError: If there is no number row or a number row
                holds something other than digits and spaces
        """
        numbered = list(numbered_lines(text))
        if len(numbered) < 2:
            line_number, line = numbered[0]
            raise PuzzleInputError("Worksheet needs number rows above the operator row", line_number, line)

        width = max(len(line) for _, line in numbered)
        rows = [line.ljust(width) for _, line in numbered]

        for (line_number, line), row in zip(numbered[:-1], rows):
            bad = [ch for ch in row if ch != " " and not ("0" <= ch <= "9")]
            if bad:
                raise PuzzleInputError(f"Unexpected character {bad[0]!r} in number row", line_number, line)

        return cls(
            number_rows=tuple(rows[:-1]),
            operator_row=rows[-1],
            line_numbers=tuple(line_number for line_number, _ in numbered)
        )

    @property
    def width(self) -> int:
        return len(self.operator_row)

    def column_blocks(self) -> List[Tuple[int, int]]:
        """
        Inclusive (start, end) column ranges of the problem blocks.

        A column separates problems when every line has a space there.
        """
        all_rows = self.number_rows + (self.operator_row,)
        blocks = []
        start = None
        for col in range(self.width):
            separator = all(row[col] == " " for row in all_rows)
            if not separator and start is None:
                start = col
            elif separator and start is not None:
                blocks.append((start, col - 1))
                start = None
        if start is not None:
            blocks.append((start, self.width - 1))
        return blocks

    def operator_for(self, col_start: int, col_end: int) -> str:
        """
        Operator of a block: '*' if present in its slice, else '+'.

        Raises:
            PuzzleInputError: If the slice holds neither operator
        """
        symbols = self.operator_row[col_start:col_end + 1]
        if MULTIPLY in symbols:
            return MULTIPLY
        if ADD in symbols:
            return ADD
        raise PuzzleInputError(
            f"No operator for problem in columns {col_start}-{col_end}",
            self.line_numbers[-1], self.operator_row.rstrip()
        )

    def row_operands(self, col_start: int, col_end: int) -> Tuple[int, ...]:
        """
        Each number row's block slice, trimmed, as one operand.

        Slices that are empty or not a single run of digits are skipped.
        """
        operands = []
        for row in self.number_rows:
            token = row[col_start:col_end + 1].strip()
            if token.isdigit():
                operands.append(int(token))
        return tuple(operands)

    def column_operands(self, col_start: int, col_end: int) -> Tuple[int, ...]:
        """Each block column's digits, top to bottom, as one operand."""
        operands = []
        for col in range(col_start, col_end + 1):
            digits = "".join(row[col] for row in self.number_rows if row[col] != " ")
            if digits:
                operands.append(int(digits))
        return tuple(operands)

    def problems(self, column_wise: bool) -> List[Problem]:
        """
        Build every problem block.

        Args:
            column_wise: Read operands by column (Part 2) instead of by row
        """
        problems = []
        for col_start, col_end in self.column_blocks():
            if column_wise:
                operands = self.column_operands(col_start, col_end)
            else:
                operands = self.row_operands(col_start, col_end)
            problems.append(Problem(
                col_start=col_start,
                col_end=col_end,
                operator=self.operator_for(col_start, col_end),
                operands=operands
            ))
        return problems


def render_problem(worksheet: Worksheet, problem: Problem) -> List[str]:
    """Block columns of the worksheet plus the evaluated expression."""
    lines = [
        row[problem.col_start:problem.col_end + 1]
        for row in worksheet.number_rows + (worksheet.operator_row,)
    ]
    lines.append("-" * (problem.col_end - problem.col_start + 1))
    lines.append(str(problem))
    return lines


@register_solver
class WorksheetSolver(DaySolver):
    """
    Column-block worksheet arithmetic, read by rows or by columns.
    """
    day = 6
    title = "Trash Compactor"
    description = "Split worksheet into column blocks; sum row-wise or column-wise results"

    def solve_part1(self, context: SolutionContext) -> int:
        return self._grand_total(context, column_wise=False)

    def solve_part2(self, context: SolutionContext) -> int:
        return self._grand_total(context, column_wise=True)

    def _grand_total(self, context: SolutionContext, column_wise: bool) -> int:
        if not context.text.strip():
            return 0

        worksheet = Worksheet.parse(context.text)
        problems = worksheet.problems(column_wise)
        logger.debug(f"Worksheet has {len(problems)} problems")

        total = 0
        for problem in problems:
            total += problem.evaluate()
            if context.animated:
                context.report_step(
                    f"Columns {problem.col_start}-{problem.col_end}: {problem.evaluate()}",
                    render_problem(worksheet, problem),
                    total
                )

        return total
