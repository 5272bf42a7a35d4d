"""Console table rendering for ranked word statistics."""
from typing import List, Sequence

from models.word_stats import RankedEntry


class TablePresenter:
    """Formats ranked entries as an aligned ``Word | # | span | proportion`` table."""

    COUNT_WIDTH = 4
    SPAN_WIDTH = 4
    PROPORTION_WIDTH = 10

    def render(self, entries: Sequence[RankedEntry]) -> str:
        """
        Render entries as table text.

        Args:
            entries: Ranked entries in display order

        Returns:
            The table with a trailing newline, or "" when there are no entries
        """
        if not entries:
            return ""

        word_width = max(len(entry.word) for entry in entries) + 1

        lines: List[str] = []
        lines.append(
            f"{'Word':<{word_width}}"
            f"|{'#':>{self.COUNT_WIDTH}}"
            f"|{'span':>{self.SPAN_WIDTH}}"
            f"|{'proportion':>{self.PROPORTION_WIDTH + 1}}"
        )
        lines.append("-" * (word_width + 1 + self.COUNT_WIDTH + 1 + self.SPAN_WIDTH))

        for entry in entries:
            word, count, span, percent = entry.as_row()
            lines.append(
                f"{word:<{word_width}}"
                f"|{count:>{self.COUNT_WIDTH}}"
                f"|{span:>{self.SPAN_WIDTH}}"
                f"|{percent:>{self.PROPORTION_WIDTH}g}%"
            )

        return "\n".join(lines) + "\n"

    def print_table(self, entries: Sequence[RankedEntry]) -> None:
        """Print the table to stdout; prints nothing for an empty result."""
        table = self.render(entries)
        if table:
            print(table, end="")
