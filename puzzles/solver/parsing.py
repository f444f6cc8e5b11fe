"""
Parsing Module - Shared helpers for turning raw puzzle text into values.
"""

from typing import Iterator, List, Optional, Sequence, Tuple, Union

from .errors import PuzzleInputError
from .interval import Range

# Raw input is either one text blob or already-split lines
RawInput = Union[str, Sequence[str]]


def to_text(raw_input: RawInput) -> str:
    """
    Normalize raw input to a single text blob.

    Args:
        raw_input: Text blob or sequence of lines

    Returns:
        Text with lines joined by newlines (trailing line breaks on
        each line are dropped first)
    """
    if isinstance(raw_input, str):
        return raw_input
    return "\n".join(line.rstrip("\r\n") for line in raw_input)


def numbered_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, line) for every non-blank line.

    Line numbers are 1-based and count blank lines, so they match the
    position in the original file.
    """
    for index, line in enumerate(text.splitlines(), start=1):
        if line.strip():
            yield index, line


def parse_int(
    token: str,
    what: str,
    line_number: Optional[int] = None,
    line: Optional[str] = None,
) -> int:
    """
    Parse a non-negative decimal integer.

    Args:
        token: Text to parse (surrounding whitespace allowed)
        what: Name of the value for the error message
        line_number: Line the token came from
        line: Full text of that line

    Returns:
        Parsed integer

    Raises:
        PuzzleInputError: If token is not a plain decimal number
    """
    token = token.strip()
    if not token.isascii() or not token.isdigit():
        raise PuzzleInputError(
            f"Expected {what} to be a non-negative integer, got {token!r}",
            line_number, line
        )
    return int(token)


def parse_range(
    token: str,
    line_number: Optional[int] = None,
    line: Optional[str] = None,
) -> Range:
    """
    Parse an inclusive range written as ``start-end``.

    Raises:
        PuzzleInputError: If the separator is missing or a bound is invalid
    """
    start_text, separator, end_text = token.strip().partition("-")
    if not separator:
        raise PuzzleInputError(
            f"Expected a range 'start-end', got {token.strip()!r}",
            line_number, line
        )
    start = parse_int(start_text, "range start", line_number, line)
    end = parse_int(end_text, "range end", line_number, line)
    if start > end:
        raise PuzzleInputError(
            f"Range start {start} is greater than end {end}",
            line_number, line
        )
    return Range(start, end)


def split_blocks(text: str) -> List[List[Tuple[int, str]]]:
    """
    Split text into blocks of numbered lines separated by blank lines.

    Returns:
        List of blocks, each a list of (line_number, line) tuples
    """
    blocks: List[List[Tuple[int, str]]] = []
    current: List[Tuple[int, str]] = []

    for index, line in enumerate(text.splitlines(), start=1):
        if line.strip():
            current.append((index, line))
        elif current:
            blocks.append(current)
            current = []

    if current:
        blocks.append(current)

    return blocks
