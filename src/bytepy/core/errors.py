"""
Error types raised by the editing engine.

Every failure the engine can report derives from BytepyError and carries an
ErrorKind, so the command shell can print the message and carry on.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of failures an editor operation can report."""

    # I/O
    IO = 'io'

    # Validation
    MISSING_ARGUMENT = 'missing-argument'
    NOT_A_NUMBER = 'not-a-number'
    NEGATIVE_OFFSET = 'negative-offset'
    LENGTH_TOO_SMALL = 'length-too-small'
    OFFSET_OUT_OF_BOUNDS = 'offset-out-of-bounds'
    LENGTH_OUT_OF_BOUNDS = 'length-out-of-bounds'
    NO_REPLACEMENT_VALUES = 'no-replacement-values'
    FILE_TOO_LARGE = 'file-too-large'

    # Format
    INVALID_HEX_LITERAL = 'invalid-hex-literal'
    INVALID_PATTERN = 'invalid-pattern'
    INVALID_FIELD_CHAR = 'invalid-field-char'
    EMPTY_TEMPLATE = 'empty-template'
    SHORT_BUFFER = 'short-buffer'
    VALUE_OUT_OF_RANGE = 'value-out-of-range'

    # Usage
    NO_SESSION = 'no-session'
    UNKNOWN_COMMAND = 'unknown-command'


class BytepyError(Exception):
    """Base class for all editor errors."""

    default_kind = ErrorKind.IO

    def __init__(self, message: str, kind: Optional[ErrorKind] = None) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind or self.default_kind

    def __str__(self) -> str:
        return self.message


class FileIOError(BytepyError):
    """Opening, seeking, reading or writing the target file failed."""

    default_kind = ErrorKind.IO


class ValidationError(BytepyError):
    """An offset, length or argument list was rejected."""

    default_kind = ErrorKind.MISSING_ARGUMENT


class FormatError(BytepyError):
    """A hex literal, search pattern or template was malformed."""

    default_kind = ErrorKind.INVALID_HEX_LITERAL


class TemplateError(FormatError):
    """A template string could not be parsed or applied."""

    default_kind = ErrorKind.INVALID_FIELD_CHAR


class UsageError(BytepyError):
    """A command was used in the wrong state or does not exist."""

    default_kind = ErrorKind.NO_SESSION
