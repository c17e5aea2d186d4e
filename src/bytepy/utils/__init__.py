"""
Utility package for hex formatting, validation and search.
"""

from .hex_utils import (
    address_width,
    format_hex_dump,
    format_offset,
    parse_byte_pattern,
    parse_hex_literal,
    parse_hex_literals,
    parse_number,
    validate_offset,
    validate_range,
)
from .search import PatternSearcher, SearchResult

__all__ = [
    'address_width',
    'format_hex_dump',
    'format_offset',
    'parse_byte_pattern',
    'parse_hex_literal',
    'parse_hex_literals',
    'parse_number',
    'validate_offset',
    'validate_range',
    'PatternSearcher',
    'SearchResult',
]
