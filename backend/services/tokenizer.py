"""Tokenizer that splits source code into identifier-like words."""
import logging
from enum import Enum
from typing import Callable, List

from models.occurrence import Occurrence

logger = logging.getLogger(__name__)


def is_delimiter(char: str) -> bool:
    """True unless ``char`` may appear in an identifier (ASCII alnum or '_')."""
    allowed_in_name = char.isascii() and (char.isalnum() or char == "_")
    return not allowed_in_name


def is_camel_case_boundary(char: str) -> bool:
    """True for delimiters and for ASCII upper-case letters."""
    return is_delimiter(char) or (char.isascii() and char.isupper())


class DelimitMode(Enum):
    """How the end of a word is detected."""

    ENTIRE_WORDS = "entire_words"
    WORDS_IN_CAMEL_CASE = "camel_case"

    @property
    def end_of_word(self) -> Callable[[str], bool]:
        """Predicate marking the first character after a word."""
        if self is DelimitMode.ENTIRE_WORDS:
            return is_delimiter
        return is_camel_case_boundary

    @classmethod
    def from_name(cls, name: str) -> "DelimitMode":
        """
        Look a mode up by its configuration name.

        Raises:
            ValueError: If ``name`` is not one of the known modes
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown delimit mode '{name}' (expected one of: {valid})") from None


class Tokenizer:
    """Scans text into an ordered list of word occurrences."""

    def __init__(self, mode: DelimitMode = DelimitMode.WORDS_IN_CAMEL_CASE):
        """
        Initialize Tokenizer.

        Args:
            mode: Word delimiting policy (camel case splitting by default)
        """
        self.mode = mode

    def tokenize(self, text: str) -> List[Occurrence]:
        """
        Split text into words tagged with their 0-based line number.

        A word starts at the first non-delimiter character. The search for its
        end begins one character later, so the first character is never a
        split point even in camel case mode ("FooBar" gives "Foo", "Bar").

        Args:
            text: Full source text

        Returns:
            Occurrences in scan order, empty if the text holds no word
        """
        is_end_of_word = self.mode.end_of_word
        occurrences = []
        length = len(text)

        end = 0
        begin = self._skip_delimiters(text, 0)
        line = 0

        while begin < length:
            line += text.count("\n", end, begin)

            end = begin + 1
            while end < length and not is_end_of_word(text[end]):
                end += 1

            occurrences.append(Occurrence(text[begin:end], line))
            begin = self._skip_delimiters(text, end)

        logger.debug(f"Tokenized {length} characters into {len(occurrences)} words ({self.mode.value})")
        return occurrences

    @staticmethod
    def _skip_delimiters(text: str, position: int) -> int:
        """Return the index of the first non-delimiter at or after ``position``."""
        length = len(text)
        while position < length and is_delimiter(text[position]):
            position += 1
        return position
