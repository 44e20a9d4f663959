"""
Monitor lines: ``monitor = <selector>, <state>[, ...]``.

The state token decides the shape of the rest of the line:

    DP-1, disable
    DP-1, addreserved, <top>, <bottom>, <left>, <right>
    DP-1, <resolution>, <position>, <scale>[, <key>, <value>]...

Parsing never fails; every field that does not parse takes its default.
"""

import logging
from collections.abc import Callable
from typing import Any

from attrs import field, frozen

from hyprdsl.core.text_utils import (
    format_float,
    parse_float,
    parse_int,
    parse_or_default,
    parse_uint,
    split_fields,
)
from hyprdsl.leaves.geometry import AutoPosition, AutoScale, Position, Scale
from hyprdsl.leaves.identifiers import AllMonitors, MonitorSelector
from hyprdsl.leaves.states import Cm

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = "preferred"


def _parse_u8(value: str) -> int:
    number = parse_uint(value, bits=8)
    return 0 if number is None else number


def _parse_sdr(value: str) -> float:
    number = parse_float(value)
    return 1.0 if number is None else number


# Tail key -> (value when the key ends the line, value parser). Also the
# order the keys are written in.
_TAIL_KEYS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "mirror": ("", str),
    "bitdepth": ("10", _parse_u8),
    "cm": ("auto", lambda value: parse_or_default(Cm.from_str, value, Cm.AUTO, "cm")),
    "sdrbrightness": ("1.0", _parse_sdr),
    "sdrsaturation": ("1.0", _parse_sdr),
    "vrr": ("0", _parse_u8),
    "transform": ("0", _parse_u8),
}


@frozen
class MonitorState:
    """
    Mode and options of an enabled monitor.

    Attributes:
        resolution: Mode text, kept verbatim ("preferred", "1920x1080@144", ...)
        position: Placement on the layout
        scale: Scale factor
        mirror: Name of the monitor to mirror
        bitdepth: Colour depth in bits
        cm: Colour management preset
        sdrbrightness: SDR brightness multiplier in HDR mode
        sdrsaturation: SDR saturation multiplier in HDR mode
        vrr: Variable refresh rate mode
        transform: Rotation/flip transform, 0-7
    """

    resolution: str = DEFAULT_RESOLUTION
    position: Position = field(factory=AutoPosition)
    scale: Scale = field(factory=AutoScale)
    mirror: str | None = None
    bitdepth: int | None = None
    cm: Cm | None = None
    sdrbrightness: float | None = None
    sdrsaturation: float | None = None
    vrr: int | None = None
    transform: int | None = None

    def __str__(self) -> str:
        parts = [self.resolution, str(self.position), str(self.scale)]
        for key in _TAIL_KEYS:
            value = getattr(self, key)
            if value is None:
                continue
            text = format_float(value) if isinstance(value, float) else str(value)
            parts.extend([key, text])
        return ", ".join(parts)


class Monitor:
    """What a monitor line does with the selected monitor."""


@frozen
class MonitorEnabled(Monitor):
    state: MonitorState = field(factory=MonitorState)

    def __str__(self) -> str:
        return str(self.state)


@frozen
class MonitorDisabled(Monitor):
    def __str__(self) -> str:
        return "disable"


@frozen
class MonitorAddReserved(Monitor):
    """Reserved screen area, in pixels, on each edge."""

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0

    def __str__(self) -> str:
        return f"addreserved, {self.top}, {self.bottom}, {self.left}, {self.right}"


@frozen
class MonitorRecord:
    selector: MonitorSelector = field(factory=AllMonitors)
    monitor: Monitor = field(factory=MonitorEnabled)

    @classmethod
    def from_str(cls, text: str) -> "MonitorRecord":
        return parse_monitor(text)

    def __str__(self) -> str:
        return format_monitor(self)


def _parse_enabled(values: list[str]) -> MonitorEnabled:
    def value_at(index: int, default: str) -> str:
        return values[index] if index < len(values) else default

    options: dict[str, Any] = {}
    index = 4
    while index < len(values):
        key = values[index]
        if key not in _TAIL_KEYS:
            logger.debug("Ignoring unknown monitor option '%s'", key)
            index += 1
            continue
        missing, parser = _TAIL_KEYS[key]
        options[key] = parser(value_at(index + 1, missing))
        index += 2

    state = MonitorState(
        resolution=values[1],
        position=parse_or_default(
            Position.from_str, value_at(2, "auto"), AutoPosition(), "position"
        ),
        scale=parse_or_default(Scale.from_str, value_at(3, "auto"), AutoScale(), "scale"),
        **options,
    )
    return MonitorEnabled(state)


def parse_monitor(text: str) -> MonitorRecord:
    """
    Parse a monitor line.

    Params:
        text: Line content after "monitor =", e.g. "DP-1, 1920x1080, 0x0, 1"

    Returns:
        The monitor selector and what the line does with it
    """
    values = split_fields(text)
    selector = MonitorSelector.from_str(values[0])
    if len(values) < 2:
        values.append(DEFAULT_RESOLUTION)

    state = values[1]
    if state == "disable":
        return MonitorRecord(selector, MonitorDisabled())
    if state == "addreserved":
        reserved = []
        for index in range(2, 6):
            number = parse_int(values[index], bits=64) if index < len(values) else None
            reserved.append(0 if number is None else number)
        return MonitorRecord(selector, MonitorAddReserved(*reserved))
    return MonitorRecord(selector, _parse_enabled(values))


def format_monitor(record: MonitorRecord) -> str:
    """Write a monitor line back as "<selector>, <rest>"."""
    return f"{record.selector}, {record.monitor}"
