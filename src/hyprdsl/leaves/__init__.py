"""
Primitive converters consumed by the selector, expression and composite parsers.
"""

from hyprdsl.leaves.geometry import (
    AutoPlacement,
    AutoPosition,
    AutoScale,
    Coordinates,
    ManualScale,
    Percent,
    Pixel,
    PixelOrPercent,
    Position,
    Range,
    Scale,
    SizeBound,
)
from hyprdsl.leaves.identifiers import (
    AllMonitors,
    ById,
    ByName,
    IdOrName,
    MonitorDescription,
    MonitorName,
    MonitorRelative,
    MonitorSelector,
)
from hyprdsl.leaves.states import (
    Cm,
    ContentType,
    FullscreenState,
    Orientation,
    TagToggleState,
    WindowRuleFullscreenState,
)
from hyprdsl.leaves.styling import (
    Angle,
    BezierCurve,
    FontWeight,
    FontWeightName,
    NamedFontWeight,
    NumericFontWeight,
)

__all__ = [
    "PixelOrPercent",
    "Pixel",
    "Percent",
    "SizeBound",
    "Range",
    "AutoPlacement",
    "Position",
    "AutoPosition",
    "Coordinates",
    "Scale",
    "AutoScale",
    "ManualScale",
    "IdOrName",
    "ById",
    "ByName",
    "MonitorSelector",
    "AllMonitors",
    "MonitorName",
    "MonitorDescription",
    "MonitorRelative",
    "FullscreenState",
    "WindowRuleFullscreenState",
    "ContentType",
    "TagToggleState",
    "Cm",
    "Orientation",
    "FontWeight",
    "FontWeightName",
    "NamedFontWeight",
    "NumericFontWeight",
    "Angle",
    "BezierCurve",
]
