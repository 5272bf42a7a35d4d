"""
Code Word Statistics for source files.

This script:
1. Loads each source file fully into memory
2. Splits it into identifier-like words (optionally on camel case)
3. Counts occurrences and line spans per word
4. Prints the words ranked by occurrence count

Usage:
    python word_count.py                          # Read WORDSTATS_SOURCE_FILE
    python word_count.py src/a.cpp src/b.cpp      # One table per file
    python word_count.py code.py --mode entire_words
"""
import sys
import logging
from argparse import ArgumentParser
from pathlib import Path
from typing import List, Optional

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent))

from services.tokenizer import DelimitMode
from services.source_loader import InputUnavailableError
from services.table_presenter import TablePresenter
from services.word_count_pipeline import WordCountPipeline
from config import SOURCE_FILE, DELIMIT_MODE, LOG_LEVEL, LOG_FORMAT
from logger import setup_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> ArgumentParser:
    """Build the command line parser, defaulting to configured values."""
    parser = ArgumentParser(description="Rank the words of a source file by occurrence count.")
    parser.add_argument("paths", nargs="*", default=[SOURCE_FILE],
                        help=f"Source files to analyse (default: {SOURCE_FILE})")
    parser.add_argument("--mode", choices=[mode.value for mode in DelimitMode], default=DELIMIT_MODE,
                        help="Split words on delimiters only, or also on camel case")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, default=LOG_LEVEL.upper(),
                        help="Logging level for diagnostics written to stderr")
    parser.add_argument("--log-format", choices=["text", "json"], default=LOG_FORMAT,
                        help="Plain text or JSON log records")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the word statistics for every requested file.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status: 0 on success, 1 if any file was unavailable
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level '{args.log_level}' (expected one of: {', '.join(LOG_LEVELS)})")
    setup_logging(args.log_level, args.log_format)

    try:
        mode = DelimitMode.from_name(args.mode)
    except ValueError as e:
        parser.error(str(e))

    pipeline = WordCountPipeline(mode=mode)
    presenter = TablePresenter()
    show_headings = len(args.paths) > 1
    status = 0
    printed_tables = 0

    try:
        for path in args.paths:
            try:
                entries = pipeline.run_file(path)
            except InputUnavailableError as e:
                print(f"Error: {e}", file=sys.stderr)
                status = 1
                continue

            if show_headings:
                if printed_tables:
                    print()
                print(f"==> {path} <==")
            presenter.print_table(entries)
            printed_tables += 1

    except KeyboardInterrupt:
        logger.warning("Word count interrupted by user")
        return 130

    return status


if __name__ == "__main__":
    sys.exit(main())
