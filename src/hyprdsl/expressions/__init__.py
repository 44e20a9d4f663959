"""
Coordinate and size descriptors and the expression trees they compile to.
"""

from hyprdsl.expressions.coord import HyprCoord
from hyprdsl.expressions.expression import (
    Float,
    Formula,
    HyprExpression,
    HyprVariable,
    Operator,
    Uint,
    Variable,
)
from hyprdsl.expressions.size import HyprSize

__all__ = [
    "HyprVariable",
    "Operator",
    "HyprExpression",
    "Uint",
    "Float",
    "Variable",
    "Formula",
    "HyprCoord",
    "HyprSize",
]
