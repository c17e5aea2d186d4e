"""
Core package for the binary editing engine.

This package implements the state and codecs behind the editor: the
FileSession owning the open file, the TemplateCodec decoding typed fields and
the error types every operation raises. The HexEditor facade lives in
bytepy.core.editor.
"""

from .errors import (
    BytepyError,
    ErrorKind,
    FileIOError,
    FormatError,
    TemplateError,
    UsageError,
    ValidationError,
)
from .session import FileSession
from .template import (
    BytesValue,
    FieldValue,
    FloatValue,
    SignedInt,
    TemplateCodec,
    TemplateField,
    UnsignedInt,
)

__all__ = [
    'FileSession',
    'TemplateCodec',
    'TemplateField',
    'FieldValue',
    'BytesValue',
    'SignedInt',
    'UnsignedInt',
    'FloatValue',
    'BytepyError',
    'ErrorKind',
    'FileIOError',
    'FormatError',
    'TemplateError',
    'UsageError',
    'ValidationError',
]
