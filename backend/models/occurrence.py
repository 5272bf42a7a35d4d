"""Occurrence data model."""
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Occurrence:
    """A single tokenized word and the 0-based line it starts on."""
    word: str
    line_number: int
