"""
hyprdsl - parsers and formatters for Hyprland's config mini-languages

hyprdsl reads workspace selectors, coordinate expressions and composite rule
lines (workspace, monitor, window rules) into immutable values, and writes
them back as canonical config text.
"""

from importlib.metadata import version

from hyprdsl.composite import (
    MonitorRecord,
    Workspace,
    WindowRuleWithParameters,
    format_monitor,
    parse_monitor,
)
from hyprdsl.expressions import HyprCoord, HyprExpression, HyprSize
from hyprdsl.registry import ConverterRegistry, default_registry
from hyprdsl.selectors import format_workspace_selectors, parse_workspace_selectors

__version__ = version("hyprdsl")

__all__ = [
    "__version__",
    "parse_workspace_selectors",
    "format_workspace_selectors",
    "HyprCoord",
    "HyprSize",
    "HyprExpression",
    "Workspace",
    "MonitorRecord",
    "parse_monitor",
    "format_monitor",
    "WindowRuleWithParameters",
    "ConverterRegistry",
    "default_registry",
]
