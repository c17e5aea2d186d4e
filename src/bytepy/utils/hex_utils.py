"""
Utility functions for hex offsets, byte literals and hex dumps.
"""

import re
from typing import Final, List, Optional, Union

from ..core.errors import ErrorKind, FormatError, ValidationError

BYTES_PER_LINE: Final[int] = 16
HALF_LINE: Final[int] = BYTES_PER_LINE // 2
HEX_COLUMN_WIDTH: Final[int] = BYTES_PER_LINE * 3

NUMBER_PATTERN: Final = re.compile(r'^[+-]?(?:0[xX][0-9a-fA-F]+|\d+)$')
HEX_LITERAL_PATTERN: Final = re.compile(r'^0[xX]([0-9a-fA-F]{2})$')

ADDRESS_WIDTHS: Final = (
    (0x100, 2),
    (0x10000, 4),
    (0x1000000, 6),
    (0x100000000, 8),
)

PATTERN_ESCAPES: Final = {
    '\\': 0x5c,
    '"': 0x22,
    'n': 0x0a,
    'r': 0x0d,
    't': 0x09,
    '0': 0x00,
}

Number = Union[int, str]


def parse_number(token: Optional[Number]) -> Optional[int]:
    """
    Parse an integer token.

    Decimal tokens may carry a sign, hexadecimal tokens use the 0x prefix.

    Args:
        token: The token as typed by the user, or an int

    Returns:
        int: The parsed value, or None if the token is not a number
    """

    if isinstance(token, bool):
        return None

    if isinstance(token, int):
        return token

    if token is None or not NUMBER_PATTERN.match(token.strip()):
        return None

    return int(token.strip(), 0) if 'x' in token.lower() else int(token.strip(), 10)


def validate_offset(offset: Optional[Number], size: int) -> int:
    """
    Check an offset on its own against the file size.

    Args:
        offset: Offset token or value
        size: Size of the open file in bytes

    Returns:
        int: The parsed offset

    Raises:
        ValidationError: If the offset is missing, not a number, negative
            or past the end of the file
    """

    if offset is None or offset == '':
        raise ValidationError("no offset given!", ErrorKind.MISSING_ARGUMENT)

    value = parse_number(offset)
    if value is None:
        raise ValidationError("offset must be a number!", ErrorKind.NOT_A_NUMBER)

    if value < 0:
        raise ValidationError("offset must be positive!", ErrorKind.NEGATIVE_OFFSET)

    if value > size:
        raise ValidationError("offset past end of file!", ErrorKind.OFFSET_OUT_OF_BOUNDS)

    return value


def validate_range(offset: Optional[Number], length: Optional[Number] = None,
                   size: int = 0) -> int:
    """
    Validate a byte range against the file size.

    Args:
        offset: Start of the range
        length: Number of bytes, or None for everything up to the end of file
        size: Size of the open file in bytes

    Returns:
        int: The resolved length

    Raises:
        ValidationError: If the range is malformed or does not fit the file
    """

    if offset is None or offset == '':
        raise ValidationError("no offset given!", ErrorKind.MISSING_ARGUMENT)

    start = parse_number(offset)
    if start is None:
        raise ValidationError("offset must be a number!", ErrorKind.NOT_A_NUMBER)

    if start < 0:
        raise ValidationError("offset must be positive!", ErrorKind.NEGATIVE_OFFSET)

    if length is None:
        if start > size:
            raise ValidationError("offset past end of file!", ErrorKind.OFFSET_OUT_OF_BOUNDS)
        count = size - start
    else:
        count = parse_number(length)
        if count is None:
            raise ValidationError("length must be a number!", ErrorKind.NOT_A_NUMBER)

    if count < 1:
        raise ValidationError("length must be greater than 0!", ErrorKind.LENGTH_TOO_SMALL)

    if start > size:
        raise ValidationError("offset past end of file!", ErrorKind.OFFSET_OUT_OF_BOUNDS)

    if count > size - start:
        raise ValidationError("length past end of file!", ErrorKind.LENGTH_OUT_OF_BOUNDS)

    return count


def parse_hex_literal(token: str) -> int:
    """
    Parse a single 0xHH byte literal.

    Args:
        token (str): Literal such as "0x1f"

    Returns:
        int: The byte value

    Raises:
        FormatError: If the token is not exactly two hex digits after 0x
    """

    match = HEX_LITERAL_PATTERN.match(token)
    if not match:
        raise FormatError(
            f"byte values must be hexadecimal constants! ({token})",
            ErrorKind.INVALID_HEX_LITERAL
        )

    return int(match.group(1), 16)


def parse_hex_literals(tokens: List[str]) -> bytes:
    """Convert a list of 0xHH literals into the bytes they denote."""

    return bytes(parse_hex_literal(token) for token in tokens)


def address_width(size: int) -> int:
    """
    Number of hex digits used for dump addresses of a file.

    Args:
        size (int): Total size of the file in bytes

    Returns:
        int: 2, 4, 6 or 8

    Raises:
        ValidationError: If the file is too large to dump
    """

    for limit, width in ADDRESS_WIDTHS:
        if size < limit:
            return width

    raise ValidationError("file too large to dump", ErrorKind.FILE_TOO_LARGE)


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}x}"


def printable_char(value: int) -> str:
    """Render a byte for the ASCII column."""

    return chr(value) if 32 < value < 127 else '.'


def format_hex_column(chunk: bytes) -> str:
    """Render up to 16 bytes as hex with a gap after the eighth byte."""

    first = ' '.join(f"{b:02x}" for b in chunk[:HALF_LINE])
    if len(chunk) <= HALF_LINE:
        return first

    second = ' '.join(f"{b:02x}" for b in chunk[HALF_LINE:])
    return f"{first}  {second}"


def format_hex_dump(offset: int, data: bytes, size: int) -> List[str]:
    """
    Format a buffer read from the file as hex dump lines.

    Args:
        offset (int): File offset the buffer was read from
        data (bytes): The bytes to dump
        size (int): Total size of the file, which fixes the address width

    Returns:
        List[str]: One line per 16 byte chunk

    Raises:
        ValidationError: If the file is too large to dump
    """

    width = address_width(size)
    lines = []

    for start in range(0, len(data), BYTES_PER_LINE):
        chunk = data[start:start + BYTES_PER_LINE]
        address = format_offset(offset + start, width)
        hex_column = format_hex_column(chunk)
        ascii_column = ''.join(printable_char(b) for b in chunk)

        lines.append(f"{address}  {hex_column:<{HEX_COLUMN_WIDTH}}  |{ascii_column}|")

    return lines


def parse_byte_pattern(token: Optional[str]) -> bytes:
    """
    Parse a search pattern literal into raw bytes.

    The literal may be wrapped in double quotes. Recognised escapes are
    \\xHH, \\\\, \\", \\n, \\r, \\t and \\0; any other character must fit
    in a single byte.

    Args:
        token: The pattern as typed, e.g. '"\\x66\\x6d\\x74"'

    Returns:
        bytes: The pattern bytes

    Raises:
        ValidationError: If the pattern is missing or empty
        FormatError: If an escape is malformed or a character is wider
            than a byte
    """

    if token is None:
        raise ValidationError("no search pattern given!", ErrorKind.MISSING_ARGUMENT)

    text = token.strip()
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1]

    result = bytearray()
    pos = 0

    while pos < len(text):
        ch = text[pos]

        if ch != '\\':
            if ord(ch) > 0xff:
                raise FormatError(
                    f"pattern character {ch!r} does not fit in a byte!",
                    ErrorKind.INVALID_PATTERN
                )
            result.append(ord(ch))
            pos += 1
            continue

        if pos + 1 >= len(text):
            raise FormatError("pattern ends with a lone backslash!", ErrorKind.INVALID_PATTERN)

        escape = text[pos + 1]

        if escape == 'x':
            digits = text[pos + 2:pos + 4]
            if len(digits) != 2 or not all(c in '0123456789abcdefABCDEF' for c in digits):
                raise FormatError(
                    f"invalid escape \\x{digits} in pattern!",
                    ErrorKind.INVALID_PATTERN
                )
            result.append(int(digits, 16))
            pos += 4
            continue

        if escape not in PATTERN_ESCAPES:
            raise FormatError(f"unknown escape \\{escape} in pattern!", ErrorKind.INVALID_PATTERN)

        result.append(PATTERN_ESCAPES[escape])
        pos += 2

    if not result:
        raise ValidationError("search pattern is empty!", ErrorKind.MISSING_ARGUMENT)

    return bytes(result)
