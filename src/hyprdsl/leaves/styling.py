"""
Styling leaf converters: font weights, gradient angles and bezier curves.

These are the strictest converters in the package: structurally wrong input
raises ConverterParseError and callers must not invent a value in its place.
"""

from enum import Enum

from attrs import frozen

from hyprdsl.core.text_utils import parse_float, parse_uint
from hyprdsl.exceptions import ConverterParseError

FONT_WEIGHT_MIN = 100
FONT_WEIGHT_MAX = 1000


class FontWeightName(Enum):
    THIN = "thin"
    ULTRA_LIGHT = "ultralight"
    LIGHT = "light"
    SEMI_LIGHT = "semilight"
    BOOK = "book"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMI_BOLD = "semibold"
    BOLD = "bold"
    ULTRA_BOLD = "ultrabold"
    HEAVY = "heavy"
    ULTRA_HEAVY = "ultraheavy"


class FontWeight:
    """A font weight keyword ("bold") or a numeric weight in 100..1000."""

    @classmethod
    def from_str(cls, text: str) -> "NamedFontWeight | NumericFontWeight":
        """
        Parse a font weight.

        Raises:
            ConverterParseError: If a number falls outside 100..1000 or the
                keyword is unknown
        """
        lowered = text.strip().lower()

        number = parse_uint(lowered, bits=16)
        if number is not None:
            if FONT_WEIGHT_MIN <= number <= FONT_WEIGHT_MAX:
                return NumericFontWeight(number)
            raise ConverterParseError(
                "FontWeight",
                text,
                f"weight must be between {FONT_WEIGHT_MIN} and {FONT_WEIGHT_MAX}",
            )

        try:
            return NamedFontWeight(FontWeightName(lowered))
        except ValueError:
            raise ConverterParseError("FontWeight", text, "unknown weight name")


@frozen
class NamedFontWeight(FontWeight):
    name: FontWeightName = FontWeightName.NORMAL

    def __str__(self) -> str:
        return self.name.value


@frozen
class NumericFontWeight(FontWeight):
    weight: int = 400

    def __str__(self) -> str:
        return str(self.weight)


@frozen
class Angle:
    """Gradient angle, written "<degrees>deg"."""

    degrees: int = 0

    @classmethod
    def from_str(cls, text: str) -> "Angle":
        """
        Parse an angle.

        A malformed number before the suffix is read as 0 degrees; a missing
        "deg" suffix is rejected.

        Raises:
            ConverterParseError: If the text is blank or lacks the "deg" suffix
        """
        text = text.strip()
        if not text:
            raise ConverterParseError("Angle", text, "empty input")
        if not text.endswith("deg"):
            raise ConverterParseError("Angle", text, "missing 'deg' suffix")
        degrees = parse_uint(text[: -len("deg")], bits=16)
        return cls(0 if degrees is None else degrees)

    def __str__(self) -> str:
        return f"{self.degrees}deg"


@frozen
class BezierCurve:
    """A named cubic bezier curve: "name, x0, y0, x1, y1"."""

    name: str
    x0: float = 0.333
    y0: float = 0.333
    x1: float = 0.667
    y1: float = 0.667

    @classmethod
    def from_str(cls, text: str) -> "BezierCurve":
        """
        Parse a bezier definition.

        Control points that are not numbers fall back to the linear defaults
        (0.333, 0.333, 0.667, 0.667).

        Raises:
            ConverterParseError: If fewer than five fields are present
        """
        values = [value.strip() for value in text.strip().split(",")]
        if len(values) < 5:
            raise ConverterParseError(
                "BezierCurve", text, f"expected 5 fields, got {len(values)}"
            )

        def point(value: str, default: float) -> float:
            parsed = parse_float(value)
            return default if parsed is None else parsed

        return cls(
            name=values[0],
            x0=point(values[1], 0.333),
            y0=point(values[2], 0.333),
            x1=point(values[3], 0.667),
            y1=point(values[4], 0.667),
        )

    def __str__(self) -> str:
        return f"{self.name}, {self.x0:.3f}, {self.y0:.3f}, {self.x1:.3f}, {self.y1:.3f}"
