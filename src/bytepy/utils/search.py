"""
Search functionality for the hex editor.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List

from ..core.errors import ErrorKind, ValidationError
from ..core.session import FileSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Represents a search result with position and match information."""
    position: int
    length: int
    match: bytes


class PatternSearcher:
    """Sliding window search for a literal byte pattern in the open file."""

    def __init__(self, session: FileSession) -> None:
        self.session = session

    def iter_matches(self, pattern: bytes) -> Iterator[int]:
        """
        Yield the offset of every occurrence of pattern, overlaps included.

        The window advances one byte at a time and each window is read from
        the file, so matches are produced as soon as they are found.

        Raises:
            UsageError: If no file is open
            ValidationError: If the pattern is empty
            FileIOError: If a seek or read fails, which ends the scan
        """

        self.session.require_open()

        if not pattern:
            raise ValidationError("search pattern is empty!", ErrorKind.MISSING_ARGUMENT)

        window = len(pattern)
        last = self.session.size - window

        logger.debug("Searching %s for %r", self.session.path, pattern)

        for offset in range(0, last + 1):
            if self.session.seek_read(offset, window) == pattern:
                logger.debug("Match at offset %d", offset)
                yield offset

    def search(self, pattern: bytes) -> List[SearchResult]:
        """
        Find all occurrences of a pattern.

        Args:
            pattern (bytes): The bytes to search for

        Returns:
            List[SearchResult]: All matches in file order
        """

        return [
            SearchResult(offset, len(pattern), pattern)
            for offset in self.iter_matches(pattern)
        ]
