"""
Identifier leaf converters: numeric-or-named ids and monitor selectors.
"""

import re

from attrs import frozen

from hyprdsl.core.text_utils import parse_int, parse_uint
from hyprdsl.exceptions import ConverterParseError

_RELATIVE_OFFSET_PATTERN = re.compile(r"^[+-]\d+\Z", re.ASCII)


class IdOrName:
    """A monitor or workspace referenced by numeric id or by name."""

    @classmethod
    def from_str(cls, text: str) -> "ById | ByName":
        """
        Parse an id or a name.

        Raises:
            ConverterParseError: If the text is blank
        """
        text = text.strip()
        if not text:
            raise ConverterParseError("IdOrName", text, "empty input")
        number = parse_uint(text)
        if number is not None:
            return ById(number)
        return ByName(text)


@frozen
class ById(IdOrName):
    id: int = 0

    def __str__(self) -> str:
        return str(self.id)


@frozen
class ByName(IdOrName):
    name: str = ""

    def __str__(self) -> str:
        return self.name


class MonitorSelector:
    """
    Which monitor(s) a rule or selector applies to.

    Text forms:
        ""            every monitor
        "desc:<d>"    monitor whose description matches <d>
        "+1" / "-1"   monitor relative to the current one
        anything else monitor name (e.g. "DP-1")
    """

    @classmethod
    def from_str(cls, text: str) -> "MonitorSelector":
        if text == "":
            return AllMonitors()
        if text.startswith("desc:"):
            return MonitorDescription(text[len("desc:") :])
        if _RELATIVE_OFFSET_PATTERN.match(text):
            offset = parse_int(text)
            if offset is not None:
                return MonitorRelative(offset)
        return MonitorName(text)


@frozen
class AllMonitors(MonitorSelector):
    def __str__(self) -> str:
        return ""


@frozen
class MonitorName(MonitorSelector):
    name: str = ""

    def __str__(self) -> str:
        return self.name


@frozen
class MonitorDescription(MonitorSelector):
    description: str = ""

    def __str__(self) -> str:
        return f"desc:{self.description}"


@frozen
class MonitorRelative(MonitorSelector):
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.offset:+d}"
