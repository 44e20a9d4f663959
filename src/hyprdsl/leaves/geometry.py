"""
Geometry leaf converters: pixel/percent values, ranges, monitor positions and scales.
"""

from enum import Enum

from attrs import frozen

from hyprdsl.core.text_utils import format_float, parse_float, parse_int, parse_uint
from hyprdsl.exceptions import ConverterParseError


class PixelOrPercent:
    """A length given either in pixels ("100") or as a percentage ("50%")."""

    @classmethod
    def from_str(cls, text: str) -> "Pixel | Percent":
        """
        Parse a pixel count or a percentage.

        Params:
            text: "<signed int>" or "<float>%"

        Returns:
            Pixel or Percent

        Raises:
            ConverterParseError: If the text is neither form
        """
        text = text.strip()
        if not text:
            raise ConverterParseError("PixelOrPercent", text, "empty input")

        pixels = parse_int(text)
        if pixels is not None:
            return Pixel(pixels)
        if text.endswith("%"):
            percent = parse_float(text[:-1])
            if percent is not None:
                return Percent(percent)
        raise ConverterParseError("PixelOrPercent", text)


@frozen
class Pixel(PixelOrPercent):
    value: int = 0

    def __str__(self) -> str:
        return str(self.value)


@frozen
class Percent(PixelOrPercent):
    value: float = 0.0

    def __str__(self) -> str:
        return f"{format_float(self.value)}%"


class SizeBound(Enum):
    """Prefix marking a size as exact, a maximum ("<") or a minimum (">")."""

    EXACT = ""
    MAX = "<"
    MIN = ">"

    def __str__(self) -> str:
        return self.value


@frozen
class Range:
    """An inclusive workspace id range such as "1-5"."""

    start: int = 1
    end: int = 1

    @classmethod
    def from_str(cls, text: str) -> "Range":
        """Parse "start-end"; a missing or malformed bound becomes 1."""
        if "-" in text:
            start, end = text.split("-", 1)
        else:
            start, end = text, "1"
        start_value = parse_uint(start)
        end_value = parse_uint(end)
        return cls(
            start=1 if start_value is None else start_value,
            end=1 if end_value is None else end_value,
        )

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class AutoPlacement(Enum):
    """Automatic monitor placement keywords."""

    AUTO = "auto"
    AUTO_RIGHT = "auto-right"
    AUTO_LEFT = "auto-left"
    AUTO_UP = "auto-up"
    AUTO_DOWN = "auto-down"
    AUTO_CENTER_RIGHT = "auto-center-right"
    AUTO_CENTER_LEFT = "auto-center-left"
    AUTO_CENTER_UP = "auto-center-up"
    AUTO_CENTER_DOWN = "auto-center-down"


class Position:
    """Monitor position: an automatic placement keyword or "<x>x<y>"."""

    @classmethod
    def from_str(cls, text: str) -> "AutoPosition | Coordinates":
        """
        Parse a monitor position.

        Raises:
            ConverterParseError: If the text is neither a keyword nor "<x>x<y>"
        """
        lowered = text.strip().lower()
        try:
            return AutoPosition(AutoPlacement(lowered))
        except ValueError:
            pass

        x, separator, y = lowered.partition("x")
        x_value = parse_int(x, bits=64)
        y_value = parse_int(y, bits=64)
        if not separator or x_value is None or y_value is None:
            raise ConverterParseError("Position", text)
        return Coordinates(x_value, y_value)


@frozen
class AutoPosition(Position):
    placement: AutoPlacement = AutoPlacement.AUTO

    def __str__(self) -> str:
        return self.placement.value


@frozen
class Coordinates(Position):
    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"{self.x}x{self.y}"


class Scale:
    """Monitor scale: "auto" or a float factor."""

    @classmethod
    def from_str(cls, text: str) -> "AutoScale | ManualScale":
        """
        Parse a monitor scale.

        Raises:
            ConverterParseError: If the text is neither "auto" nor a number
        """
        lowered = text.strip().lower()
        if lowered == "auto":
            return AutoScale()
        factor = parse_float(lowered)
        if factor is None:
            raise ConverterParseError("Scale", text)
        return ManualScale(factor)


@frozen
class AutoScale(Scale):
    def __str__(self) -> str:
        return "auto"


@frozen
class ManualScale(Scale):
    factor: float = 1.0

    def __str__(self) -> str:
        return f"{self.factor:.2f}"
