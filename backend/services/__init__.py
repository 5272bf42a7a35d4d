"""Services for the code word statistics tool."""
from .tokenizer import Tokenizer, DelimitMode, is_delimiter, is_camel_case_boundary
from .stats_aggregator import StatsAggregator, count_lines
from .ranker import Ranker
from .source_loader import SourceLoader, InputUnavailableError
from .table_presenter import TablePresenter
from .word_count_pipeline import WordCountPipeline

__all__ = ['Tokenizer', 'DelimitMode', 'is_delimiter', 'is_camel_case_boundary', 'StatsAggregator', 'count_lines', 'Ranker', 'SourceLoader', 'InputUnavailableError', 'TablePresenter', 'WordCountPipeline']
