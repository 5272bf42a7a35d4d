"""Pipeline orchestrating tokenization, aggregation and ranking."""
import logging
from typing import List, Optional

from models.word_stats import RankedEntry
from services.tokenizer import DelimitMode, Tokenizer
from services.stats_aggregator import StatsAggregator, count_lines
from services.ranker import Ranker
from services.source_loader import SourceLoader

logger = logging.getLogger(__name__)


class WordCountPipeline:
    """Runs text through tokenizer, aggregator and ranker."""

    def __init__(
        self,
        mode: DelimitMode = DelimitMode.WORDS_IN_CAMEL_CASE,
        source_loader: Optional[SourceLoader] = None
    ):
        """
        Initialize the pipeline.

        Args:
            mode: Word delimiting policy used by the tokenizer
            source_loader: Loader used by run_file (a default SourceLoader if omitted)
        """
        self.tokenizer = Tokenizer(mode)
        self.aggregator = StatsAggregator()
        self.ranker = Ranker()
        self.source_loader = source_loader or SourceLoader()

    def run(self, text: str) -> List[RankedEntry]:
        """
        Compute ranked word statistics for ``text``.

        Each call owns its own occurrences and statistics; nothing is shared
        between runs.
        """
        occurrences = self.tokenizer.tokenize(text)
        word_stats = self.aggregator.aggregate(occurrences, count_lines(text))
        ranked = self.ranker.rank(word_stats)

        logger.info(
            f"Counted {len(occurrences)} words, {len(ranked)} distinct",
            extra={"extra": {"words": len(occurrences), "distinct_words": len(ranked)}}
        )
        return ranked

    def run_file(self, path: str) -> List[RankedEntry]:
        """
        Load ``path`` and compute its ranked word statistics.

        Raises:
            InputUnavailableError: If the file cannot be read
        """
        return self.run(self.source_loader.load_text(path))
