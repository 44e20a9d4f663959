"""
Arithmetic expression trees over Hyprland's runtime variables.

Trees are produced by compiling ``HyprCoord``/``HyprSize`` descriptors or by
parsing hand-written text such as ``cursor_x-(window_w*0.5)``. Evaluation is
left to the consumer; nothing here knows the variables' runtime values.
"""

from enum import Enum

from attrs import frozen

from hyprdsl.core.text_utils import format_float, parse_float, parse_uint
from hyprdsl.exceptions import ConverterParseError


class HyprVariable(Enum):
    """A runtime quantity an expression may refer to."""

    MONITOR_W = "monitor_w"
    MONITOR_H = "monitor_h"
    WINDOW_X = "window_x"
    WINDOW_Y = "window_y"
    WINDOW_W = "window_w"
    WINDOW_H = "window_h"
    CURSOR_X = "cursor_x"
    CURSOR_Y = "cursor_y"

    @classmethod
    def from_str(cls, text: str) -> "HyprVariable":
        """
        Parse a variable name, ignoring case and wrapping parentheses.

        Raises:
            ConverterParseError: If the name is not a known variable
        """
        name = text.strip().lstrip("(").rstrip(")").lower()
        try:
            return cls(name)
        except ValueError:
            raise ConverterParseError("HyprVariable", text, "unknown variable")

    def __str__(self) -> str:
        return self.value


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_str(cls, text: str) -> "Operator":
        try:
            return cls(text.strip())
        except ValueError:
            raise ConverterParseError("Operator", text, "unknown operator")

    def __str__(self) -> str:
        return self.value


class HyprExpression:
    """
    Node of an expression tree: ``Uint``, ``Float``, ``Variable`` or ``Formula``.

    ``str()`` writes every formula fully parenthesised, so the text parses
    back into a tree of the same shape. Integral floats are written without
    a fraction and read back as ``Uint``: ``Float(1.0)`` becomes ``Uint(1)``.
    """

    @classmethod
    def from_str(cls, text: str) -> "HyprExpression":
        """
        Parse expression text.

        ``+`` and ``-`` bind looser than ``*`` and ``/``, and operators of
        equal precedence associate to the left.

        Params:
            text: Expression such as "monitor_w*0.5-10"

        Returns:
            The root node of the parsed tree

        Raises:
            ConverterParseError: On unbalanced parentheses, a missing operand
                or text that is neither a literal nor a formula
        """
        text = text.strip()

        literal = _parse_literal(text)
        if literal is not None:
            return literal

        inner = _strip_outer_parens(text)
        if inner is not None:
            literal = _parse_literal(inner.strip())
            if literal is not None:
                return literal
        body = text if inner is None else inner

        split = _find_split(body, "+-") or _find_split(body, "*/")
        if split is None:
            raise ConverterParseError("HyprExpression", text, "no operator found")

        position, operator_char = split
        left_text = body[:position].strip()
        right_text = body[position + 1 :].strip()
        if not left_text or not right_text:
            raise ConverterParseError("HyprExpression", text, "missing operand")

        return Formula(
            cls.from_str(left_text),
            Operator.from_str(operator_char),
            cls.from_str(right_text),
        )


@frozen
class Uint(HyprExpression):
    value: int = 0

    def __str__(self) -> str:
        return str(self.value)


@frozen
class Float(HyprExpression):
    value: float = 0.0

    def __str__(self) -> str:
        return format_float(self.value)


@frozen
class Variable(HyprExpression):
    variable: HyprVariable = HyprVariable.MONITOR_W

    def __str__(self) -> str:
        return str(self.variable)


@frozen
class Formula(HyprExpression):
    left: HyprExpression
    operator: Operator
    right: HyprExpression

    def __str__(self) -> str:
        return f"({self.left}{self.operator}{self.right})"


def _parse_literal(text: str) -> Uint | Float | Variable | None:
    integer = parse_uint(text)
    if integer is not None:
        return Uint(integer)
    number = parse_float(text)
    if number is not None:
        return Float(number)
    try:
        return Variable(HyprVariable.from_str(text))
    except ConverterParseError:
        return None


def _strip_outer_parens(text: str) -> str | None:
    """Return the text inside one pair of parentheses wrapping all of ``text``."""
    if not (text.startswith("(") and text.endswith(")")):
        return None
    depth = 0
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0 and index != len(text) - 1:
                # "(a)+(b)": the first group closes early
                return None
    return text[1:-1]


def _find_split(text: str, operators: str) -> tuple[int, str] | None:
    """Find the last top-level occurrence of any of ``operators``."""
    depth = 0
    found = None
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return None
        elif depth == 0 and char in operators:
            found = (index, char)
    if depth != 0:
        return None
    return found
