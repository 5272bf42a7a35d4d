"""Word statistics data models."""
import functools
import math
from dataclasses import dataclass
from typing import Tuple


@functools.total_ordering
class WordStatistics:
    """
    Accumulates the occurrences of one distinct word.

    Statistics are ordered by occurrence count alone, so two instances with
    the same count compare equal even if their spans differ.
    """

    def __init__(self, total_line_count: int = 0):
        self.total_line_count = total_line_count
        self.occurrence_count = 0
        self.lowest_line = 0
        self.highest_line = 0

    def add_occurrence(self, line_number: int) -> None:
        """Record one more occurrence of the word on ``line_number``."""
        self.occurrence_count += 1

        if self.occurrence_count == 1:
            self.lowest_line = self.highest_line = line_number
        else:
            self.lowest_line = min(self.lowest_line, line_number)
            self.highest_line = max(self.highest_line, line_number)

    @property
    def span(self) -> int:
        """Number of lines between first and last occurrence, inclusive."""
        if self.occurrence_count == 0:
            return 0
        return self.highest_line - self.lowest_line + 1

    @property
    def proportion(self) -> float:
        """Span as a fraction of the whole file."""
        if self.total_line_count == 0:
            return 0.0
        return self.span / self.total_line_count

    def __lt__(self, other: "WordStatistics") -> bool:
        if not isinstance(other, WordStatistics):
            return NotImplemented
        return self.occurrence_count < other.occurrence_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordStatistics):
            return NotImplemented
        return self.occurrence_count == other.occurrence_count

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"WordStatistics(occurrence_count={self.occurrence_count}, "
            f"lowest_line={self.lowest_line}, highest_line={self.highest_line}, "
            f"total_line_count={self.total_line_count})"
        )


@dataclass(frozen=True, eq=False)
class RankedEntry:
    """A word paired with its finalized statistics."""
    word: str
    stats: WordStatistics

    @property
    def occurrence_count(self) -> int:
        return self.stats.occurrence_count

    @property
    def span(self) -> int:
        return self.stats.span

    @property
    def proportion_percent(self) -> float:
        """Proportion as a percentage, rounded half away from zero to 2 decimals."""
        return math.floor(self.stats.proportion * 100 * 100 + 0.5) / 100

    def as_row(self) -> Tuple[str, int, int, float]:
        """Return the ``(word, count, span, proportion_percent)`` output row."""
        return (self.word, self.occurrence_count, self.span, self.proportion_percent)
