"""
Core type definitions for hyprdsl.

This module contains the type aliases shared by converters, composites and
the registry.
"""

from collections.abc import Callable
from typing import Any

ParseFunction = Callable[[str], Any]

FormatFunction = Callable[[Any], str]

# Payload field kinds reported to editors; see hyprdsl.registry
FieldKind = str
