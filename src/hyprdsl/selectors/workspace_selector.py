"""
Workspace selector expressions.

A selector string is a run of predicates written back to back with no
separator, for example ``r[1-5]m[DP-1]w[tv1-3]``. Each predicate is
introduced by a single letter:

    r[a-b]      workspace id range
    s[bool]     special workspace or not
    n[...]      named workspace: "true"/"false", "s:<prefix>" or "e:<suffix>"
    m[...]      on monitor: name, "desc:<d>", "+1"/"-1" or empty for all
    w[...]      window count: flag letters "tfgvp" then "<n>" or "<a>-<b>"
    f[n]        fullscreen state, -1 to 2

Shorthands without brackets are also read: ``m-1`` (relative monitor),
``s:<prefix>`` and ``e:<suffix>`` (named), and flags followed directly by a
count such as ``v3``. Formatting always writes the bracketed form.

The list parser is greedy and never backtracks: it stops at the first
predicate it cannot read and drops the remaining text.
"""

import logging
import re
from collections.abc import Callable, Iterable
from enum import Enum

from attrs import field, frozen

from hyprdsl.core.text_utils import (
    find_matching_bracket,
    format_bool,
    parse_bool,
    parse_int,
    parse_uint,
)
from hyprdsl.exceptions import ConverterParseError
from hyprdsl.leaves.geometry import Range
from hyprdsl.leaves.identifiers import AllMonitors, MonitorRelative, MonitorSelector
from hyprdsl.selectors.window_count import (
    FLAG_CHARACTERS,
    WindowCountRange,
    WindowCountSingle,
    WorkspaceSelectorWindowCount,
)

logger = logging.getLogger(__name__)

_COMPACT_MONITOR_PATTERN = re.compile(r"^m([+-]\d+)", re.ASCII)
_COMPACT_NAMED_PATTERN = re.compile(r"^([se]):(\S*)")
_COMPACT_WINDOW_COUNT_PATTERN = re.compile(
    rf"^[{FLAG_CHARACTERS}]+\d+(?:-\d+)?", re.ASCII
)


class WorkspaceSelectorNamed:
    """Named-workspace predicate: by flag, by name prefix or by name suffix."""

    @classmethod
    def from_str(cls, text: str) -> "IsNamed | NameStartsWith | NameEndsWith":
        """Parse "s:<prefix>", "e:<suffix>" or a boolean; never fails."""
        text = text.strip()
        if text.startswith("s:"):
            return NameStartsWith(text[len("s:") :])
        if text.startswith("e:"):
            return NameEndsWith(text[len("e:") :])
        return IsNamed(parse_bool(text) or False)


@frozen
class IsNamed(WorkspaceSelectorNamed):
    is_named: bool = False

    def __str__(self) -> str:
        return format_bool(self.is_named)


@frozen
class NameStartsWith(WorkspaceSelectorNamed):
    prefix: str = ""

    def __str__(self) -> str:
        return f"s:{self.prefix}"


@frozen
class NameEndsWith(WorkspaceSelectorNamed):
    suffix: str = ""

    def __str__(self) -> str:
        return f"e:{self.suffix}"


class WorkspaceSelectorFullscreen(Enum):
    """Fullscreen state of the workspace's fullscreen window."""

    NO_FULLSCREEN = -1
    FULLSCREEN = 0
    MAXIMIZED = 1
    FULLSCREEN_WITHOUT_CLIENT_STATE = 2

    @classmethod
    def default(cls) -> "WorkspaceSelectorFullscreen":
        return cls.FULLSCREEN

    @classmethod
    def from_num(cls, number: int) -> "WorkspaceSelectorFullscreen":
        """Map a state number to a member; numbers outside -1..2 give the default."""
        try:
            return cls(number)
        except ValueError:
            return cls.default()

    @classmethod
    def from_str(cls, text: str) -> "WorkspaceSelectorFullscreen":
        """
        Parse a fullscreen state number.

        Raises:
            ConverterParseError: If the text is not an 8-bit signed integer
        """
        number = parse_int(text.strip(), bits=8)
        if number is None:
            raise ConverterParseError("WorkspaceSelectorFullscreen", text)
        return cls.from_num(number)

    def __str__(self) -> str:
        return str(self.value)


class WorkspaceSelector:
    """
    One predicate of a workspace selector expression.

    The variants are the ``Selector*`` classes below; ``str()`` gives the
    canonical bracketed text of the predicate.
    """

    @classmethod
    def from_str(cls, text: str) -> "WorkspaceSelector":
        """
        Parse exactly the first predicate of ``text``; the rest is ignored.

        Raises:
            ConverterParseError: If no predicate can be read at the start
        """
        parsed = parse_single_selector(text.strip())
        if parsed is None:
            raise ConverterParseError("WorkspaceSelector", text)
        return parsed[0]


@frozen
class SelectorNone(WorkspaceSelector):
    def __str__(self) -> str:
        return ""


@frozen
class SelectorRange(WorkspaceSelector):
    range: Range = field(factory=Range)

    def __str__(self) -> str:
        return f"r[{self.range}]"


@frozen
class SelectorSpecial(WorkspaceSelector):
    is_special: bool = False

    def __str__(self) -> str:
        return f"s[{format_bool(self.is_special)}]"


@frozen
class SelectorNamed(WorkspaceSelector):
    named: IsNamed | NameStartsWith | NameEndsWith = field(factory=IsNamed)

    def __str__(self) -> str:
        return f"n[{self.named}]"


@frozen
class SelectorMonitor(WorkspaceSelector):
    monitor: MonitorSelector = field(factory=AllMonitors)

    def __str__(self) -> str:
        return f"m[{self.monitor}]"


@frozen
class SelectorWindowCount(WorkspaceSelector):
    window_count: WindowCountSingle | WindowCountRange = field(
        factory=WindowCountSingle
    )

    def __str__(self) -> str:
        return f"w[{self.window_count}]"


@frozen
class SelectorFullscreen(WorkspaceSelector):
    state: WorkspaceSelectorFullscreen = WorkspaceSelectorFullscreen.FULLSCREEN

    def __str__(self) -> str:
        return f"f[{self.state}]"


def _parse_window_count(content: str) -> SelectorWindowCount | None:
    try:
        return SelectorWindowCount(WorkspaceSelectorWindowCount.from_str(content))
    except ConverterParseError:
        return None


def _parse_fullscreen(content: str) -> SelectorFullscreen | None:
    try:
        return SelectorFullscreen(WorkspaceSelectorFullscreen.from_str(content))
    except ConverterParseError:
        return None


# Introducing prefix -> reader for the bracket content; None means no match.
_BRACKETED_READERS: dict[str, Callable[[str], WorkspaceSelector | None]] = {
    "r[": lambda content: SelectorRange(Range.from_str(content)),
    "s[": lambda content: SelectorSpecial(parse_bool(content) or False),
    "n[": lambda content: SelectorNamed(WorkspaceSelectorNamed.from_str(content)),
    "m[": lambda content: SelectorMonitor(MonitorSelector.from_str(content)),
    "w[": _parse_window_count,
    "f[": _parse_fullscreen,
}


def _parse_bracketed(text: str) -> tuple[WorkspaceSelector, str] | None:
    prefix = text[:2]
    reader = _BRACKETED_READERS.get(prefix)
    if reader is None:
        return None
    end = find_matching_bracket(text, prefix)
    if end is None:
        return None
    selector = reader(text[len(prefix) : end])
    if selector is None:
        return None
    return selector, text[end + 1 :]


def _parse_compact(text: str) -> tuple[WorkspaceSelector, str] | None:
    match = _COMPACT_MONITOR_PATTERN.match(text)
    if match:
        offset = parse_int(match.group(1))
        if offset is None:
            return None
        return SelectorMonitor(MonitorRelative(offset)), text[match.end() :]

    match = _COMPACT_NAMED_PATTERN.match(text)
    if match:
        named = WorkspaceSelectorNamed.from_str(match.group(0))
        return SelectorNamed(named), text[match.end() :]

    match = _COMPACT_WINDOW_COUNT_PATTERN.match(text)
    if match:
        selector = _parse_window_count(match.group(0))
        if selector is None:
            return None
        return selector, text[match.end() :]

    return None


def parse_single_selector(text: str) -> tuple[WorkspaceSelector, str] | None:
    """
    Read one predicate from the start of ``text``.

    Params:
        text: Selector text, already stripped of leading whitespace

    Returns:
        The predicate and the unconsumed remainder, or None if nothing at the
        start of the text is a predicate
    """
    return _parse_bracketed(text) or _parse_compact(text)


def parse_workspace_selectors(text: str) -> list[WorkspaceSelector]:
    """
    Parse a whole selector expression into its predicates, in source order.

    Never raises: text from the first unreadable predicate onwards is dropped.

    Params:
        text: Selector expression such as "r[1-5]m[DP-1]"

    Returns:
        The predicates read before the first failure; empty for empty input
    """
    selectors: list[WorkspaceSelector] = []
    remaining = text.strip()
    while remaining:
        parsed = parse_single_selector(remaining)
        if parsed is None:
            logger.debug("Discarding unparsed workspace selector text '%s'", remaining)
            break
        selector, rest = parsed
        selectors.append(selector)
        remaining = rest.strip()
    return selectors


def format_workspace_selectors(selectors: Iterable[WorkspaceSelector]) -> str:
    """Write predicates back to back in their canonical bracketed form."""
    return "".join(str(selector) for selector in selectors)


class IdOrNameOrWorkspaceSelector:
    """
    A workspace given by id, by "name:<name>", or by a selector expression.

    Parsing never fails; the default is workspace id 1.
    """

    @classmethod
    def default(cls) -> "WorkspaceById":
        return WorkspaceById()

    @classmethod
    def from_str(
        cls, text: str
    ) -> "WorkspaceById | WorkspaceByName | WorkspaceBySelectors":
        text = text.strip()
        if text.startswith("name:"):
            return WorkspaceByName(text[len("name:") :])
        workspace_id = parse_uint(text)
        if workspace_id is not None:
            return WorkspaceById(workspace_id)
        return WorkspaceBySelectors(parse_workspace_selectors(text))


@frozen
class WorkspaceById(IdOrNameOrWorkspaceSelector):
    id: int = 1

    def __str__(self) -> str:
        return str(self.id)


@frozen
class WorkspaceByName(IdOrNameOrWorkspaceSelector):
    name: str = ""

    def __str__(self) -> str:
        return f"name:{self.name}"


@frozen
class WorkspaceBySelectors(IdOrNameOrWorkspaceSelector):
    selectors: tuple[WorkspaceSelector, ...] = field(converter=tuple, factory=tuple)

    def __str__(self) -> str:
        return format_workspace_selectors(self.selectors)
