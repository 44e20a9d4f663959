"""
Core hyprdsl components.

This package provides the text helpers and type aliases every converter
builds on.
"""

from hyprdsl.core.text_utils import (
    find_matching_bracket,
    format_bool,
    format_float,
    parse_bool,
    parse_float,
    parse_int,
    parse_or_default,
    parse_uint,
    split_fields,
)
from hyprdsl.core.types import FieldKind, FormatFunction, ParseFunction

__all__ = [
    "FieldKind",
    "FormatFunction",
    "ParseFunction",
    "find_matching_bracket",
    "format_bool",
    "format_float",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_or_default",
    "parse_uint",
    "split_fields",
]
