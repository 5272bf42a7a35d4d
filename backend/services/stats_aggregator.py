"""Aggregation of word occurrences into per-word statistics."""
import logging
from typing import Dict, Iterable

from models.occurrence import Occurrence
from models.word_stats import WordStatistics

logger = logging.getLogger(__name__)


def count_lines(text: str) -> int:
    """Number of lines in ``text``: newline count plus one."""
    return text.count("\n") + 1


class StatsAggregator:
    """Builds a word to statistics mapping from scanned occurrences."""

    def aggregate(
        self,
        occurrences: Iterable[Occurrence],
        total_line_count: int
    ) -> Dict[str, WordStatistics]:
        """
        Accumulate statistics for every distinct word.

        Args:
            occurrences: Occurrences in original scan order
            total_line_count: Number of lines in the source text

        Returns:
            Mapping from word to statistics, iterating in ascending word order
        """
        word_stats: Dict[str, WordStatistics] = {}

        for occurrence in occurrences:
            stats = word_stats.get(occurrence.word)
            if stats is None:
                stats = word_stats[occurrence.word] = WordStatistics()
            stats.total_line_count = total_line_count
            stats.add_occurrence(occurrence.line_number)

        logger.debug(f"Aggregated {len(word_stats)} distinct words over {total_line_count} lines")
        return {word: word_stats[word] for word in sorted(word_stats)}
