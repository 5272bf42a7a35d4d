"""Ranking of aggregated word statistics."""
from typing import List, Mapping

from models.word_stats import RankedEntry, WordStatistics


class Ranker:
    """Orders words by how often they occur."""

    def rank(self, word_stats: Mapping[str, WordStatistics]) -> List[RankedEntry]:
        """
        Sort words by occurrence count, most frequent first.

        Only the occurrence count takes part in the comparison. Words with
        equal counts stay in ascending lexicographic order, whatever the
        iteration order of ``word_stats``.

        Args:
            word_stats: Mapping from word to its statistics

        Returns:
            Ranked entries, empty for an empty mapping
        """
        entries = [RankedEntry(word, word_stats[word]) for word in sorted(word_stats)]
        # sorted() stays stable with reverse=True
        return sorted(entries, key=lambda entry: entry.stats, reverse=True)
