"""
Text helpers shared by every converter.

Hyprland reads numbers the way Rust's ``str::parse`` does: no surrounding
whitespace, no underscores, an optional leading sign, and a fixed integer
width. Python's ``int()`` and ``float()`` are more lenient, so converters go
through the helpers here instead of calling them directly.
"""

import logging
import math
import re
from collections.abc import Callable
from decimal import Decimal
from typing import TypeVar

from hyprdsl.exceptions import ConverterParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SIGNED_INT_PATTERN = re.compile(r"^[+-]?\d+\Z", re.ASCII)
_UNSIGNED_INT_PATTERN = re.compile(r"^\+?\d+\Z", re.ASCII)
_FLOAT_PATTERN = re.compile(
    r"^[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf|infinity|nan)\Z",
    re.IGNORECASE | re.ASCII,
)

TRUE_WORDS = {"true", "1", "yes", "on"}
FALSE_WORDS = {"false", "0", "no", "off"}


def parse_int(value: str, bits: int = 32) -> int | None:
    """
    Parse a signed integer of the given width.

    Params:
        value: Text to parse, taken verbatim
        bits: Integer width; out-of-range values are rejected

    Returns:
        The integer, or None if the text is not a valid signed integer
    """
    if not _SIGNED_INT_PATTERN.match(value):
        return None
    number = int(value)
    limit = 1 << (bits - 1)
    if not -limit <= number < limit:
        return None
    return number


def parse_uint(value: str, bits: int = 32) -> int | None:
    """
    Parse an unsigned integer of the given width.

    Params:
        value: Text to parse, taken verbatim
        bits: Integer width; out-of-range values are rejected

    Returns:
        The integer, or None if the text is not a valid unsigned integer
    """
    if not _UNSIGNED_INT_PATTERN.match(value):
        return None
    number = int(value)
    if number >= 1 << bits:
        return None
    return number


def parse_float(value: str) -> float | None:
    """Parse a floating point number, returning None when the text is not one."""
    if not _FLOAT_PATTERN.match(value):
        return None
    return float(value)


def parse_bool(value: str) -> bool | None:
    """
    Parse the boolean spellings Hyprland accepts.

    Params:
        value: Text such as "true", "0", "yes" or "off" (case-insensitive)

    Returns:
        True or False, or None if the text is not a recognised spelling
    """
    word = value.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    return None


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_float(value: float) -> str:
    """
    Format a float the way Hyprland writes it back.

    Integral values drop their fractional part ("50" rather than "50.0").
    Everything else uses the shortest digits that round-trip, always in
    positional notation: "-" separates offsets in coordinate text, so
    "1e-05" would not read back.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == int(value) and abs(value) < 1e16:
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def find_matching_bracket(text: str, prefix: str, closing: str = "]") -> int | None:
    """
    Find the index of the bracket closing the one opened by ``prefix``.

    Nested ``[`` increase the depth, so ``w[[x]]`` closes at the last
    character rather than the first ``]``.

    Params:
        text: Text starting with ``prefix``
        prefix: Opening token, ending in the bracket to match (e.g. "m[")
        closing: Closing bracket character

    Returns:
        Index of the closing bracket in ``text``, or None if it never closes
    """
    if not text.startswith(prefix):
        return None

    depth = 1
    for index in range(len(prefix), len(text)):
        char = text[index]
        if char == "[":
            depth += 1
        elif char == closing:
            depth -= 1
            if depth == 0:
                return index
    return None


def split_fields(text: str, separator: str = ",") -> list[str]:
    """Split a composite record on ``separator`` and trim every field."""
    return [field.strip() for field in text.split(separator)]


def parse_or_default(
    parser: Callable[[str], T], text: str, default: T, field: str | None = None
) -> T:
    """
    Run a rejecting parser, substituting ``default`` when it rejects the text.

    This is how accept-and-default converters consume reject-with-signal
    ones: only ``ConverterParseError`` is caught.

    Params:
        parser: Callable that raises ConverterParseError on malformed input
        text: Text to parse
        default: Value to use when the parser rejects the text
        field: Optional field name, used for the debug record

    Returns:
        The parsed value, or ``default``
    """
    try:
        return parser(text)
    except ConverterParseError as e:
        logger.debug("Using default for %s: %s", field or e.type_name, e)
        return default
