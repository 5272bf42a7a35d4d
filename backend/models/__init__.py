"""Data models for the code word statistics tool."""
from .occurrence import Occurrence
from .word_stats import WordStatistics, RankedEntry

__all__ = [
    "Occurrence",
    "WordStatistics",
    "RankedEntry",
]
