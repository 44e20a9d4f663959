"""
Window sizes, as used by the ``size`` window rule.
"""

from attrs import field, frozen

from hyprdsl.core.text_utils import parse_or_default
from hyprdsl.exceptions import ConverterParseError
from hyprdsl.expressions.coord import base_expression
from hyprdsl.expressions.expression import HyprExpression, HyprVariable
from hyprdsl.leaves.geometry import Pixel, PixelOrPercent, SizeBound


def _parse_dimension(token: str) -> tuple[PixelOrPercent, SizeBound]:
    bound = SizeBound.EXACT
    if token.startswith(SizeBound.MAX.value):
        bound = SizeBound.MAX
    elif token.startswith(SizeBound.MIN.value):
        bound = SizeBound.MIN
    value = parse_or_default(
        PixelOrPercent.from_str, token[len(bound.value) :], Pixel(0), "HyprSize dimension"
    )
    return value, bound


@frozen
class HyprSize:
    """
    A window size: "<w> <h>", each optionally prefixed with "<" (at most)
    or ">" (at least).
    """

    width: PixelOrPercent = field(factory=Pixel)
    height: PixelOrPercent = field(factory=Pixel)
    width_bound: SizeBound = SizeBound.EXACT
    height_bound: SizeBound = SizeBound.EXACT

    @classmethod
    def from_str(cls, text: str) -> "HyprSize":
        """
        Parse a size; unreadable dimensions become ``Pixel(0)``.

        Raises:
            ConverterParseError: If the text is blank
        """
        text = text.strip()
        if not text:
            raise ConverterParseError("HyprSize", text, "empty input")
        parts = text.split(" ")
        width, width_bound = _parse_dimension(parts[0])
        height, height_bound = _parse_dimension(parts[1] if len(parts) > 1 else "")
        return cls(width, height, width_bound, height_bound)

    def __str__(self) -> str:
        return f"{self.width_bound}{self.width} {self.height_bound}{self.height}"

    def to_expressions(self) -> tuple[HyprExpression, HyprExpression]:
        """Compile into (width, height) expressions against the monitor size."""
        return (
            base_expression(self.width, HyprVariable.MONITOR_W),
            base_expression(self.height, HyprVariable.MONITOR_H),
        )
