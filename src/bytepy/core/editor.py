"""
Editor module tying the open file to dump, inspect, edit and search.
"""

import logging
from typing import Iterator, List, Optional, Sequence

from .errors import ErrorKind, ValidationError
from .session import FileSession
from .template import FieldValue, TemplateCodec
from ..utils.hex_utils import (
    Number,
    address_width,
    format_hex_dump,
    parse_byte_pattern,
    parse_hex_literals,
    parse_number,
    validate_offset,
    validate_range,
)
from ..utils.search import PatternSearcher

logger = logging.getLogger(__name__)


class ByteEditor:
    """
    Overwrites bytes of the open file from 0xHH literals.

    By default a write must fit inside the file, the same bound dump and
    inspect apply. With allow_extend only the start offset is checked and a
    write running past the end is handed to the file system, which extends
    the file. The cached session size is not refreshed in either mode.
    """

    def __init__(self, session: FileSession, allow_extend: bool = False) -> None:
        self.session = session
        self.allow_extend = allow_extend

    def edit(self, offset: Optional[Number], literals: Sequence[str]) -> int:
        """
        Replace successive bytes starting at offset.

        Args:
            offset: Offset of the first byte to replace
            literals: Replacement values such as ["0x1f", "0x00"]

        Returns:
            int: Number of bytes written

        Raises:
            ValidationError: On a bad offset, no values, or a write past the
                end of the file when extending is not allowed
            FormatError: If a value is not a 0xHH literal
            FileIOError: If the write fails
        """

        self.session.require_open()
        start = validate_offset(offset, self.session.size)

        if not literals:
            raise ValidationError(
                "no replacement byte values given!",
                ErrorKind.NO_REPLACEMENT_VALUES
            )

        data = parse_hex_literals(list(literals))

        if not self.allow_extend and start + len(data) > self.session.size:
            raise ValidationError("length past end of file!", ErrorKind.LENGTH_OUT_OF_BOUNDS)

        self.session.seek_write(start, data)
        return len(data)


class HexEditor:
    """Engine behind every command that works on the open file."""

    def __init__(self, allow_extend: bool = False) -> None:
        self.session = FileSession()
        self.codec = TemplateCodec()
        self.editor = ByteEditor(self.session, allow_extend)
        self.searcher = PatternSearcher(self.session)

    def __enter__(self) -> 'HexEditor':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def open(self, path: Optional[str]) -> str:
        """Open path for editing, closing any file that is already open."""

        return self.session.open(path)

    def close(self) -> Optional[str]:
        """Close the open file, if any."""

        return self.session.close()

    def dump(self, offset: Optional[Number], length: Optional[Number] = None) -> List[str]:
        """
        Hex dump length bytes starting at offset.

        Without a length everything up to the end of the file is dumped.

        Returns:
            List[str]: The dump lines
        """

        self.session.require_open()
        count = validate_range(offset, length, self.session.size)
        start = parse_number(offset)
        address_width(self.session.size)  # too large to dump: fail before reading

        data = self.session.seek_read(start, count)
        return format_hex_dump(start, data, self.session.size)

    def inspect(self, offset: Optional[Number], template: Optional[str]) -> List[FieldValue]:
        """
        Decode the bytes at offset using a template.

        Returns:
            List[FieldValue]: The decoded values in template order

        Raises:
            ValidationError: On a bad offset or if the template runs past
                the end of the file
            TemplateError: If the template is missing or invalid
        """

        self.session.require_open()
        start = validate_offset(offset, self.session.size)

        length = self.codec.length_of(template)
        if start + length > self.session.size:
            raise ValidationError("length past end of file!", ErrorKind.LENGTH_OUT_OF_BOUNDS)

        data = self.session.seek_read(start, length)
        return self.codec.decode(data, template)

    def edit(self, offset: Optional[Number], literals: Sequence[str]) -> int:
        """Overwrite bytes at offset with 0xHH literals."""

        return self.editor.edit(offset, literals)

    def search(self, pattern: Optional[str]) -> Iterator[int]:
        """
        Search for a pattern literal such as "\\x66\\x6d\\x74".

        Returns:
            Iterator[int]: Offsets of every match, produced as they are found
        """

        self.session.require_open()
        return self.searcher.iter_matches(parse_byte_pattern(pattern))
