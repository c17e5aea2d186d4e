"""
Session module owning the file currently open for editing.
"""

import logging
import os
from typing import BinaryIO, Optional

from .errors import ErrorKind, FileIOError, UsageError, ValidationError

logger = logging.getLogger(__name__)


class FileSession:
    """Owns the handle, path and size of the file open for editing."""

    def __init__(self) -> None:
        self.path: Optional[str] = None
        self.size = 0
        self.handle: Optional[BinaryIO] = None

    def __enter__(self) -> 'FileSession':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        """Whether a file is currently open."""

        return self.handle is not None

    def require_open(self) -> None:
        """Raise UsageError unless a file is open."""

        if not self.is_open:
            raise UsageError("open a file first!", ErrorKind.NO_SESSION)

    def open(self, path: Optional[str]) -> str:
        """
        Open a file for in-place binary editing.

        Any file that is already open is closed first. The size is recorded
        once here and is not refreshed by later writes.

        Args:
            path: Path of the file to open

        Returns:
            str: Confirmation message

        Raises:
            ValidationError: If no path is given
            FileIOError: If the file cannot be opened
        """

        self.close()

        if not path:
            raise ValidationError("no file name given!", ErrorKind.MISSING_ARGUMENT)

        try:
            handle = open(path, 'r+b')
        except OSError as e:
            raise FileIOError(f"couldn't open {path} {e.strerror or e}") from e

        try:
            size = os.fstat(handle.fileno()).st_size
        except OSError as e:
            handle.close()
            raise FileIOError(f"couldn't stat {path} {e.strerror or e}") from e

        self.handle = handle
        self.path = path
        self.size = size

        logger.debug("Opened %s (%d bytes)", path, size)
        return f"{path} is open for editing..."

    def close(self) -> Optional[str]:
        """
        Close the open file, if any.

        Returns:
            str: Confirmation message, or None if nothing was open
        """

        if self.handle is None:
            return None

        path = self.path
        try:
            self.handle.close()
        finally:
            self.handle = None
            self.path = None
            self.size = 0

        logger.debug("Closed %s", path)
        return f"closed {path}"

    def _seek(self, offset: int) -> BinaryIO:
        self.require_open()

        try:
            self.handle.seek(offset, os.SEEK_SET)
        except (OSError, ValueError) as e:
            raise FileIOError(f"seek failed {getattr(e, 'strerror', None) or e}") from e

        return self.handle

    def seek_read(self, offset: int, length: int) -> bytes:
        """
        Read exactly length bytes starting at offset.

        Raises:
            FileIOError: On seek or read failure, or if fewer bytes are read
        """

        handle = self._seek(offset)

        try:
            data = handle.read(length)
        except OSError as e:
            raise FileIOError(f"couldn't read {e.strerror or e}") from e

        if len(data) != length:
            raise FileIOError(
                f"couldn't read {length} bytes at offset {offset}, got {len(data)}"
            )

        return data

    def seek_write(self, offset: int, data: bytes) -> None:
        """
        Overwrite bytes in place starting at offset.

        Raises:
            FileIOError: On seek or write failure
        """

        handle = self._seek(offset)

        try:
            handle.write(data)
            handle.flush()
        except OSError as e:
            raise FileIOError(f"couldn't write {e.strerror or e}") from e

        logger.debug("Wrote %d bytes at offset %d of %s", len(data), offset, self.path)
