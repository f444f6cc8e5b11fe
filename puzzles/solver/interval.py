"""
Interval Module - Inclusive integer ranges.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Range:
    """
    Inclusive integer interval [start, end].

    Ordering compares start first, then end, so sorting a list of
    ranges sorts by start.

    Attributes:
        start: First integer in the range
        end: Last integer in the range (start <= end)
    """
    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is greater than end {self.end}")

    @property
    def size(self) -> int:
        """Number of integers covered."""
        return self.end - self.start + 1

    def __contains__(self, value: int) -> bool:
        return self.start <= value <= self.end

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
