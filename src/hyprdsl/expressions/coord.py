"""
Window placement coordinates, as used by the ``move`` window rule.

A coordinate is written ``[onscreen] [undercursor] <x>[-<sub>] <y>[-<sub>]``
where each axis is a pixel count or a percentage, optionally minus a pixel
offset: ``100%-50 50%`` places the window flush against the right edge.
"""

from attrs import field, frozen

from hyprdsl.core.text_utils import parse_or_default, parse_uint
from hyprdsl.exceptions import ConverterParseError
from hyprdsl.expressions.expression import (
    Float,
    Formula,
    HyprExpression,
    HyprVariable,
    Operator,
    Uint,
    Variable,
)
from hyprdsl.leaves.geometry import Percent, Pixel, PixelOrPercent


def base_expression(value: PixelOrPercent, dimension: HyprVariable) -> HyprExpression:
    """
    Compile a pixel or percentage into an expression.

    Pixels become their absolute value; percentages become a fraction of
    ``dimension``.
    """
    if isinstance(value, Percent):
        return Formula(Variable(dimension), Operator.MULTIPLY, Float(value.value * 0.01))
    return Uint(abs(value.value))


def _parse_axis(token: str) -> tuple[PixelOrPercent, int]:
    if "-" in token:
        value_text, sub_text = token.split("-", 1)
    else:
        value_text, sub_text = token, ""
    value = parse_or_default(PixelOrPercent.from_str, value_text, Pixel(0), "HyprCoord axis")
    sub = parse_uint(sub_text)
    return value, 0 if sub is None else sub


def _format_axis(value: PixelOrPercent, sub: int) -> str:
    if sub:
        return f"{value}-{sub}"
    return str(value)


@frozen
class HyprCoord:
    """
    A window position on screen.

    Attributes:
        x: Horizontal position
        y: Vertical position
        x_sub: Pixels subtracted from ``x``
        y_sub: Pixels subtracted from ``y``
        under_cursor: Position is relative to the cursor, with percentages
            taken of the window size instead of the monitor size
        on_screen: Hint to clamp the result onto the monitor
    """

    x: PixelOrPercent = field(factory=Pixel)
    y: PixelOrPercent = field(factory=Pixel)
    x_sub: int = 0
    y_sub: int = 0
    under_cursor: bool = False
    on_screen: bool = False

    @classmethod
    def from_str(cls, text: str) -> "HyprCoord":
        """
        Parse a coordinate.

        Tokens are separated by single spaces. Unreadable axis values become
        ``Pixel(0)`` and unreadable offsets become 0. Axis tokens after the
        second are ignored; the flags are read wherever they appear.

        Raises:
            ConverterParseError: If the text is blank
        """
        text = text.strip()
        if not text:
            raise ConverterParseError("HyprCoord", text, "empty input")

        on_screen = False
        under_cursor = False
        axes: list[tuple[PixelOrPercent, int]] = []
        for part in text.split(" "):
            part = part.strip()
            if part == "onscreen":
                on_screen = True
            elif part == "undercursor":
                under_cursor = True
            elif len(axes) < 2:
                axes.append(_parse_axis(part))

        x, x_sub = axes[0] if axes else (Pixel(0), 0)
        y, y_sub = axes[1] if len(axes) > 1 else (Pixel(0), 0)
        return cls(
            x=x,
            y=y,
            x_sub=x_sub,
            y_sub=y_sub,
            under_cursor=under_cursor,
            on_screen=on_screen,
        )

    def __str__(self) -> str:
        prefix = ""
        if self.on_screen:
            prefix += "onscreen "
        if self.under_cursor:
            prefix += "undercursor "
        return (
            f"{prefix}{_format_axis(self.x, self.x_sub)} {_format_axis(self.y, self.y_sub)}"
        )

    def to_expressions(self) -> tuple[HyprExpression, HyprExpression]:
        """
        Compile into one expression per axis.

        ``on_screen`` does not change the expressions; clamping is up to the
        evaluator.

        Returns:
            (x expression, y expression)
        """
        if self.under_cursor:
            width, height = HyprVariable.WINDOW_W, HyprVariable.WINDOW_H
        else:
            width, height = HyprVariable.MONITOR_W, HyprVariable.MONITOR_H
        return (
            self._axis_expression(self.x, self.x_sub, width, HyprVariable.CURSOR_X),
            self._axis_expression(self.y, self.y_sub, height, HyprVariable.CURSOR_Y),
        )

    def _axis_expression(
        self,
        value: PixelOrPercent,
        sub: int,
        dimension: HyprVariable,
        cursor: HyprVariable,
    ) -> HyprExpression:
        expression = base_expression(value, dimension)
        if sub:
            expression = Formula(expression, Operator.SUBTRACT, Uint(sub))
        if self.under_cursor:
            expression = Formula(Variable(cursor), Operator.SUBTRACT, expression)
        return expression
