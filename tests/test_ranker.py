"""Unit tests for Ranker."""
import sys
sys.path.insert(0, 'backend')

import pytest
from models.word_stats import WordStatistics
from services.ranker import Ranker
from services.stats_aggregator import StatsAggregator, count_lines
from services.tokenizer import DelimitMode, Tokenizer


def stats_with_count(count):
    """Build statistics with ``count`` occurrences on line 0."""
    stats = WordStatistics(1)
    for _ in range(count):
        stats.add_occurrence(0)
    return stats


class TestRanker:
    """Test suite for Ranker class."""

    @pytest.fixture
    def ranker(self):
        """Create a Ranker instance for testing."""
        return Ranker()

    def test_empty(self, ranker):
        """Test that an empty mapping ranks to an empty list."""
        assert ranker.rank({}) == []

    def test_descending_count(self, ranker):
        """Test that entries are sorted by occurrence count, highest first."""
        word_stats = {"a": stats_with_count(1), "b": stats_with_count(3), "c": stats_with_count(2)}
        assert [e.word for e in ranker.rank(word_stats)] == ["b", "c", "a"]

    def test_ties_in_lexicographic_order(self, ranker):
        """Test that equal counts keep ascending word order whatever the insertion order."""
        word_stats = {
            "pear": stats_with_count(2),
            "apple": stats_with_count(2),
            "Zoo": stats_with_count(2),
            "most": stats_with_count(5),
            "fig": stats_with_count(1),
        }
        assert [e.word for e in ranker.rank(word_stats)] == ["most", "Zoo", "apple", "pear", "fig"]

    def test_span_does_not_affect_order(self, ranker):
        """Test that a wider span does not promote a word with equal count."""
        wide = WordStatistics(10)
        wide.add_occurrence(0)
        wide.add_occurrence(9)
        narrow = WordStatistics(10)
        narrow.add_occurrence(3)
        narrow.add_occurrence(3)

        ranked = ranker.rank({"wide": wide, "narrow": narrow})
        assert [e.word for e in ranked] == ["narrow", "wide"]

    def test_ranked_properties(self, ranker):
        """Test sortedness and span bounds on a realistic snippet."""
        text = (
            "class WordStats\n"
            "{\n"
            "public:\n"
            "    size_t span() const;\n"
            "    size_t nbOccurrences() const;\n"
            "private:\n"
            "    size_t nbOccurrences_ = 0;\n"
            "};\n"
        )
        total_lines = count_lines(text)
        occurrences = Tokenizer(DelimitMode.WORDS_IN_CAMEL_CASE).tokenize(text)
        ranked = ranker.rank(StatsAggregator().aggregate(occurrences, total_lines))

        assert sum(e.occurrence_count for e in ranked) == len(occurrences)
        for entry in ranked:
            assert 1 <= entry.span <= total_lines
            if entry.occurrence_count == 1:
                assert entry.span == 1
        for first, second in zip(ranked, ranked[1:]):
            assert first.occurrence_count >= second.occurrence_count
            if first.occurrence_count == second.occurrence_count:
                assert first.word <= second.word

        assert ranked[0].word == "size_t"
        assert ranked[0].occurrence_count == 3
