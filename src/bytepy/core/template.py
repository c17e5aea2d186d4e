"""
Template codec for decoding and encoding typed fields.

A template is a string of field characters, each optionally followed by a
decimal repeat count:

    a   raw bytes, null padded (the count is the string length)
    c   signed byte             C   unsigned byte
    n   u16 big-endian          N   u32 big-endian
    v   u16 little-endian       V   u32 little-endian
    f   native single float     d   native double float
    x   pad byte (the count is the number of bytes skipped)

Whitespace between fields is ignored, so "N n2 a4" and "Nn2a4" are the same
template.
"""

import struct
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Final, Iterable, List, Optional, Tuple, Union

from .errors import ErrorKind, TemplateError


@dataclass(frozen=True)
class BytesValue:
    """Raw bytes decoded from an 'a' field."""
    value: bytes

    def __str__(self) -> str:
        return self.value.decode('latin-1')


@dataclass(frozen=True)
class SignedInt:
    """Signed integer decoded from a 'c' field."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UnsignedInt:
    """Unsigned integer decoded from a 'C', 'n', 'N', 'v' or 'V' field."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FloatValue:
    """IEEE-754 value decoded from an 'f' or 'd' field."""
    value: float

    def __str__(self) -> str:
        return format(self.value, '.15g')


FieldValue = Union[BytesValue, SignedInt, UnsignedInt, FloatValue]

_NO_VALUE: Final = object()

COUNT_DIGITS: Final[str] = "0123456789"
PARSE_CACHE_SIZE: Final[int] = 128

# code -> (struct format, width of one item, value type)
FIELD_KINDS: Final[Dict[str, Tuple[str, int, Any]]] = {
    'a': ('s', 1, BytesValue),
    'c': ('b', 1, SignedInt),
    'C': ('B', 1, UnsignedInt),
    'n': ('>H', 2, UnsignedInt),
    'N': ('>I', 4, UnsignedInt),
    'v': ('<H', 2, UnsignedInt),
    'V': ('<I', 4, UnsignedInt),
    'f': ('=f', 4, FloatValue),
    'd': ('=d', 8, FloatValue),
    'x': ('x', 1, None),
}

INT_RANGES: Final[Dict[str, Tuple[int, int]]] = {
    'c': (-0x80, 0x7f),
    'C': (0, 0xff),
    'n': (0, 0xffff),
    'v': (0, 0xffff),
    'N': (0, 0xffffffff),
    'V': (0, 0xffffffff),
}


@dataclass(frozen=True)
class TemplateField:
    """One field character of a template together with its repeat count."""
    code: str
    count: int = 1

    @property
    def width(self) -> int:
        """Number of bytes the field consumes."""

        return FIELD_KINDS[self.code][1] * self.count

    @property
    def value_count(self) -> int:
        """Number of values the field produces."""

        if self.code == 'x':
            return 0

        if self.code == 'a':
            return 1

        return self.count


@lru_cache(maxsize=PARSE_CACHE_SIZE)
def parse_template(template: Optional[str]) -> Tuple[TemplateField, ...]:
    """
    Parse a template string into field descriptors.

    Args:
        template: The template, e.g. "NnC2"

    Returns:
        Tuple[TemplateField, ...]: Fields in template order

    Raises:
        TemplateError: On an empty template, an unknown field character or
            a repeat count that is not made of the digits 0-9
    """

    if not template or not template.strip():
        raise TemplateError("no format template given!", ErrorKind.EMPTY_TEMPLATE)

    fields = []
    pos = 0

    while pos < len(template):
        code = template[pos]
        pos += 1

        if code.isspace():
            continue

        if code not in FIELD_KINDS:
            raise TemplateError(
                f"invalid format option '{code}'",
                ErrorKind.INVALID_FIELD_CHAR
            )

        digits_end = pos
        while digits_end < len(template) and template[digits_end] in COUNT_DIGITS:
            digits_end += 1

        count = int(template[pos:digits_end]) if digits_end > pos else 1
        pos = digits_end

        fields.append(TemplateField(code, count))

    return tuple(fields)


class TemplateCodec:
    """Parses templates and converts between bytes and typed values."""

    def parse(self, template: Optional[str]) -> Tuple[TemplateField, ...]:
        """Parse a template string into field descriptors."""

        return parse_template(template)

    def length_of(self, template: str) -> int:
        """Total number of bytes the template consumes."""

        return sum(field.width for field in self.parse(template))

    def decode(self, data: bytes, template: str) -> List[FieldValue]:
        """
        Decode a buffer according to a template.

        Args:
            data: Bytes to decode, at least length_of(template) long
            template: The template string

        Returns:
            List[FieldValue]: One value per field repetition, pad bytes
            produce nothing

        Raises:
            TemplateError: If the template is invalid or the buffer is short
        """

        fields = self.parse(template)
        needed = sum(field.width for field in fields)

        if len(data) < needed:
            raise TemplateError(
                f"template needs {needed} bytes, got {len(data)}",
                ErrorKind.SHORT_BUFFER
            )

        values: List[FieldValue] = []
        cursor = 0

        for field in fields:
            fmt, item_width, value_type = FIELD_KINDS[field.code]

            if field.code == 'x':
                cursor += field.width
                continue

            if field.code == 'a':
                values.append(BytesValue(bytes(data[cursor:cursor + field.count])))
                cursor += field.count
                continue

            for _ in range(field.count):
                (raw,) = struct.unpack_from(fmt, data, cursor)
                values.append(value_type(raw))
                cursor += item_width

        return values

    def encode(self, values: Iterable[Any], template: str) -> bytes:
        """
        Encode values according to a template.

        Values may be plain Python values or FieldValue instances. String
        fields are null padded or truncated to their width, pad bytes are
        written as zero.

        Raises:
            TemplateError: If the template is invalid, a value is out of range
                or the number of values does not match the template
        """

        fields = self.parse(template)
        items = iter(values)
        out = bytearray()

        for field in fields:
            fmt, _, _ = FIELD_KINDS[field.code]

            if field.code == 'x':
                out.extend(b'\x00' * field.count)
                continue

            for _ in range(field.value_count):
                try:
                    value = next(items)
                except StopIteration:
                    raise TemplateError(
                        "not enough values for template",
                        ErrorKind.SHORT_BUFFER
                    ) from None

                value = getattr(value, 'value', value)
                out.extend(self._encode_value(field, fmt, value))

        if next(items, _NO_VALUE) is not _NO_VALUE:
            raise TemplateError("too many values for template", ErrorKind.VALUE_OUT_OF_RANGE)

        return bytes(out)

    def _encode_value(self, field: TemplateField, fmt: str, value: Any) -> bytes:
        if field.code == 'a':
            if isinstance(value, str):
                try:
                    value = value.encode('latin-1')
                except UnicodeEncodeError as e:
                    raise TemplateError(
                        f"string value {value!r} does not fit in bytes",
                        ErrorKind.VALUE_OUT_OF_RANGE
                    ) from e

            if not isinstance(value, (bytes, bytearray)):
                raise TemplateError(
                    f"field 'a' needs a string, got {value!r}",
                    ErrorKind.VALUE_OUT_OF_RANGE
                )

            return bytes(value[:field.count]).ljust(field.count, b'\x00')

        if field.code in INT_RANGES:
            low, high = INT_RANGES[field.code]
            if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
                raise TemplateError(
                    f"value {value!r} out of range for field '{field.code}'",
                    ErrorKind.VALUE_OUT_OF_RANGE
                )
            return struct.pack(fmt, value)

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TemplateError(
                f"field '{field.code}' needs a number, got {value!r}",
                ErrorKind.VALUE_OUT_OF_RANGE
            )

        try:
            return struct.pack(fmt, value)
        except (struct.error, OverflowError) as e:
            raise TemplateError(
                f"value {value!r} out of range for field '{field.code}'",
                ErrorKind.VALUE_OUT_OF_RANGE
            ) from e
