"""
Errors Module - Exceptions raised by the puzzle solvers.
"""

from typing import Optional


class PuzzleInputError(ValueError):
    """
    Raised when puzzle input cannot be parsed.

    Attributes:
        message: What was wrong with the input
        line_number: 1-based line number of the offending line, if known
        line: Text of the offending line, if known
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line = line

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        if self.line is None:
            return f"{self.message} (line {self.line_number})"
        return f"{self.message} (line {self.line_number}: {self.line!r})"
