"""Source loading service for reading code files into memory."""
import logging
import os
from typing import Optional

from config import SOURCE_ENCODING

logger = logging.getLogger(__name__)


class InputUnavailableError(Exception):
    """Raised when a source file cannot be read."""

    def __init__(self, path: str, cause: Optional[Exception] = None):
        self.path = path
        self.cause = cause
        message = f"Cannot read source file: {path}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)


class SourceLoader:
    """Reads a whole text file as one string."""

    def __init__(self, encoding: str = SOURCE_ENCODING):
        """
        Initialize SourceLoader.

        Args:
            encoding: Text encoding of the source files
        """
        self.encoding = encoding

    def load_text(self, path: str) -> str:
        """
        Load the full contents of ``path``.

        Undecodable bytes are replaced, and newlines are left untranslated so
        that only real '\\n' characters end a line.

        Args:
            path: Path to the source file

        Returns:
            The file contents

        Raises:
            InputUnavailableError: If the file is missing or unreadable
        """
        if not os.path.isfile(path):
            logger.debug(f"Source file not found: {path}")
            raise InputUnavailableError(path)

        try:
            with open(path, "r", encoding=self.encoding, errors="replace", newline="") as source:
                text = source.read()
        except (OSError, LookupError) as e:
            logger.debug(f"Failed to read {path}: {str(e)}")
            raise InputUnavailableError(path, cause=e) from e

        logger.info(f"Loaded {path}: {len(text)} characters")
        return text
