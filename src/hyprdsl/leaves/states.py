"""
Keyword and numeric-state leaf converters.

Every enum here formats as its config keyword via ``str()``. Parsing rejects
unknown keywords with ConverterParseError, except ``TagToggleState``, which
falls back to toggling.
"""

from enum import Enum

from hyprdsl.core.text_utils import parse_uint
from hyprdsl.exceptions import ConverterParseError


class FullscreenState(Enum):
    """Fullscreen state as the numeric mode used by ``fullscreenstate``."""

    NONE = 0
    MAXIMIZE = 1
    FULLSCREEN = 2
    MAXIMIZE_AND_FULLSCREEN = 3

    @classmethod
    def from_num(cls, number: int) -> "FullscreenState":
        """Map a mode number to a state; unknown numbers mean NONE."""
        try:
            return cls(number)
        except ValueError:
            return cls.NONE

    @classmethod
    def from_str(cls, text: str) -> "FullscreenState":
        number = parse_uint(text.strip(), bits=8)
        if number is None:
            raise ConverterParseError("FullscreenState", text)
        return cls.from_num(number)

    def __str__(self) -> str:
        return str(self.value)


class WindowRuleFullscreenState(Enum):
    """Fullscreen state matcher; "*" matches any state."""

    ANY = "*"
    NONE = "0"
    MAXIMIZE = "1"
    FULLSCREEN = "2"
    MAXIMIZE_AND_FULLSCREEN = "3"

    @classmethod
    def from_str(cls, text: str) -> "WindowRuleFullscreenState":
        """
        Parse a matcher from the first non-blank character of ``text``.

        Raises:
            ConverterParseError: If the text is blank or starts with another character
        """
        stripped = text.lstrip()
        if not stripped:
            raise ConverterParseError("WindowRuleFullscreenState", text, "empty input")
        try:
            return cls(stripped[0])
        except ValueError:
            raise ConverterParseError("WindowRuleFullscreenState", text)

    def __str__(self) -> str:
        return self.value


class ContentType(Enum):
    NONE = "none"
    PHOTO = "photo"
    VIDEO = "video"
    GAME = "game"

    @classmethod
    def from_str(cls, text: str) -> "ContentType":
        try:
            return cls(text.strip())
        except ValueError:
            raise ConverterParseError("ContentType", text)

    def __str__(self) -> str:
        return self.value


class TagToggleState(Enum):
    """How a ``tag`` rule changes a tag: set ("+"), unset ("-") or toggle."""

    SET = "+"
    UNSET = "-"
    TOGGLE = ""

    @classmethod
    def from_str(cls, text: str) -> "TagToggleState":
        """Parse "+" or "-"; anything else toggles."""
        stripped = text.strip()
        if stripped in ("+", "-"):
            return cls(stripped)
        return cls.TOGGLE

    def __str__(self) -> str:
        return self.value


class Cm(Enum):
    """Monitor color management preset."""

    AUTO = "auto"
    SRGB = "srgb"
    DCIP3 = "dcip3"
    DP3 = "dp3"
    ADOBE = "adobe"
    WIDE = "wide"
    EDID = "edid"
    HDR = "hdr"
    HDREDID = "hdredid"

    @classmethod
    def from_str(cls, text: str) -> "Cm":
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ConverterParseError("Cm", text)

    def __str__(self) -> str:
        return self.value


class Orientation(Enum):
    """Master layout orientation used by workspace ``layoutopt`` rules."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"

    @classmethod
    def from_str(cls, text: str) -> "Orientation":
        try:
            return cls(text.strip())
        except ValueError:
            raise ConverterParseError("Orientation", text)

    def __str__(self) -> str:
        return self.value
