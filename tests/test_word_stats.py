"""Unit tests for WordStatistics and RankedEntry."""
import sys
sys.path.insert(0, 'backend')

import pytest
from models.word_stats import RankedEntry, WordStatistics


def make_stats(lines, total_line_count=10):
    """Build statistics with one occurrence per line number given."""
    stats = WordStatistics(total_line_count)
    for line in lines:
        stats.add_occurrence(line)
    return stats


class TestWordStatistics:
    """Test suite for WordStatistics."""

    def test_fresh_statistics(self):
        """Test that new statistics have no occurrences and zero span."""
        stats = WordStatistics()
        assert stats.occurrence_count == 0
        assert stats.span == 0
        assert stats.proportion == 0.0

    def test_first_occurrence_sets_both_bounds(self):
        """Test that the first occurrence pins lowest and highest line."""
        stats = make_stats([7])
        assert stats.lowest_line == 7
        assert stats.highest_line == 7
        assert stats.span == 1

    def test_bounds_widen(self):
        """Test that later occurrences widen the line bounds in either direction."""
        stats = make_stats([5, 2, 9, 4])
        assert stats.occurrence_count == 4
        assert stats.lowest_line == 2
        assert stats.highest_line == 9
        assert stats.span == 8

    def test_proportion(self):
        """Test that proportion is span over total line count."""
        stats = make_stats([0, 2], total_line_count=4)
        assert stats.proportion == pytest.approx(0.75)

    def test_proportion_without_lines(self):
        """Test that a zero total line count yields zero proportion."""
        stats = make_stats([0, 3], total_line_count=0)
        assert stats.proportion == 0.0

    def test_ordering_uses_count_only(self):
        """Test that comparisons look at occurrence count, not span."""
        narrow = make_stats([1, 1])
        wide = make_stats([0, 9])
        single = make_stats([4])

        assert narrow == wide
        assert not narrow < wide
        assert narrow <= wide and narrow >= wide
        assert single < narrow
        assert wide > single
        assert single != wide

    def test_compare_with_other_type(self):
        """Test that comparing with another type is not supported."""
        assert (WordStatistics() == 0) is False
        with pytest.raises(TypeError):
            WordStatistics() < 1


class TestRankedEntry:
    """Test suite for RankedEntry."""

    def test_row(self):
        """Test that the output row carries count, span and rounded percentage."""
        entry = RankedEntry("cat", make_stats([0, 2], total_line_count=4))
        assert entry.as_row() == ("cat", 2, 3, 75.0)

    def test_percent_rounding(self):
        """Test that percentages are rounded to two decimals."""
        entry = RankedEntry("x", make_stats([0], total_line_count=3))
        assert entry.proportion_percent == 33.33

        entry = RankedEntry("y", make_stats([0, 1], total_line_count=3))
        assert entry.proportion_percent == 66.67

    def test_percent_half_rounds_up(self):
        """Test that a half hundredth rounds away from zero."""
        entry = RankedEntry("z", make_stats([0], total_line_count=32))
        assert entry.proportion_percent == 3.13

    def test_entries_compare_by_identity(self):
        """Test that entries are hashable and only equal to themselves."""
        near = RankedEntry("a", make_stats([0]))
        far = RankedEntry("a", make_stats([9]))

        assert near != far
        assert near == near
        assert len({near, far}) == 2
