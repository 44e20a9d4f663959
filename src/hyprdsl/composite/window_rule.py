"""
Window rules: ``windowrule = <rule>, <parameter>, <parameter>, ...``.

A rule is a keyword followed by an optional payload (``move 100 200``,
``tag +games``); parameters are ``key:value`` matchers that select the
windows the rule applies to (``class:firefox``, ``floating:1``).
"""

import logging
from collections.abc import Callable

from attrs import field, frozen

from hyprdsl.core.text_utils import parse_bool, parse_or_default, parse_uint, split_fields
from hyprdsl.exceptions import ConverterParseError
from hyprdsl.expressions.coord import HyprCoord
from hyprdsl.expressions.size import HyprSize
from hyprdsl.leaves.identifiers import ById, IdOrName
from hyprdsl.leaves.states import (
    ContentType,
    FullscreenState,
    TagToggleState,
    WindowRuleFullscreenState,
)
from hyprdsl.selectors.workspace_selector import (
    IdOrNameOrWorkspaceSelector,
    WorkspaceById,
)

logger = logging.getLogger(__name__)

FLAG_RULES = (
    "float",
    "tile",
    "fullscreen",
    "maximize",
    "persistent",
    "pseudo",
    "noinitialfocus",
    "pin",
    "unset",
    "nomaxsize",
    "stayfocused",
)

# Rules whose payload has a grammar of its own; the text is kept as written.
PAYLOAD_RULES = ("group", "suppress", "animation", "bordercolor", "idleingibit", "opacity")

MATCH_PARAMETERS = ("class", "title", "initialClass", "initialTitle", "tag", "xdgtag")
BOOL_PARAMETERS = ("xwayland", "floating", "fullscreen", "pinned", "focus", "group", "modal")


def _split_pair(text: str) -> tuple[str, str]:
    if " " in text:
        first, second = text.split(" ", 1)
        return first, second
    return text, ""


def _uint_or_zero(text: str) -> int:
    number = parse_uint(text.strip())
    return 0 if number is None else number


class WindowRule:
    """The effect a window rule applies."""

    @classmethod
    def default(cls) -> "FlagRule":
        return FlagRule("float")

    @classmethod
    def from_str(cls, text: str) -> "WindowRule":
        """
        Parse a rule keyword and its payload.

        The keyword is case-insensitive. Payloads that do not parse take the
        payload type's default rather than failing the rule.

        Params:
            text: Rule text such as "move 100 200" or "tag +games"

        Returns:
            The parsed rule

        Raises:
            ConverterParseError: If the text is blank or the keyword is unknown
        """
        text = text.strip()
        if not text:
            raise ConverterParseError("WindowRule", text, "empty input")

        keyword, payload = _split_pair(text)
        keyword = keyword.strip().lower()

        if keyword in FLAG_RULES:
            return FlagRule(keyword)
        if keyword in PAYLOAD_RULES:
            return PayloadRule(keyword, payload.strip())
        parser = _RULE_PARSERS.get(keyword)
        if parser is None:
            raise ConverterParseError("WindowRule", text, f"unknown rule '{keyword}'")
        return parser(payload)


@frozen
class FlagRule(WindowRule):
    """A rule without a payload, such as ``float`` or ``pin``."""

    keyword: str = "float"

    def __str__(self) -> str:
        return self.keyword


@frozen
class CenterRule(WindowRule):
    respect_reserved_area: bool = False

    def __str__(self) -> str:
        return "center 1" if self.respect_reserved_area else "center"


@frozen
class FullscreenStateRule(WindowRule):
    internal: FullscreenState = FullscreenState.NONE
    client: FullscreenState = FullscreenState.NONE

    def __str__(self) -> str:
        return f"fullscreenstate {self.internal} {self.client}"


@frozen
class MoveRule(WindowRule):
    coord: HyprCoord = field(factory=HyprCoord)

    def __str__(self) -> str:
        return f"move {self.coord}"


@frozen
class SizeRule(WindowRule):
    size: HyprSize = field(factory=HyprSize)

    def __str__(self) -> str:
        return f"size {self.size}"


@frozen
class MonitorRule(WindowRule):
    monitor: IdOrName = field(factory=ById)

    def __str__(self) -> str:
        return f"monitor {self.monitor}"


@frozen
class WorkspaceTargetRule(WindowRule):
    """Open the window on a workspace; the target text is kept verbatim."""

    workspace: str = ""

    def __str__(self) -> str:
        return f"workspace {self.workspace}"


@frozen
class ContentRule(WindowRule):
    content: ContentType = ContentType.NONE

    def __str__(self) -> str:
        return f"content {self.content}"


@frozen
class NoCloseForRule(WindowRule):
    milliseconds: int = 0

    def __str__(self) -> str:
        return f"noclosefor {self.milliseconds}"


@frozen
class TagRule(WindowRule):
    state: TagToggleState = TagToggleState.TOGGLE
    tag: str = ""

    def __str__(self) -> str:
        return f"tag {self.state}{self.tag}"


@frozen
class MaxSizeRule(WindowRule):
    width: int = 0
    height: int = 0

    def __str__(self) -> str:
        return f"maxsize {self.width} {self.height}"


@frozen
class MinSizeRule(WindowRule):
    width: int = 0
    height: int = 0

    def __str__(self) -> str:
        return f"minsize {self.width} {self.height}"


@frozen
class PayloadRule(WindowRule):
    keyword: str
    payload: str = ""

    def __str__(self) -> str:
        if not self.payload:
            return self.keyword
        return f"{self.keyword} {self.payload}"


def _parse_fullscreen_state_rule(payload: str) -> FullscreenStateRule:
    internal, client = _split_pair(payload)
    return FullscreenStateRule(
        parse_or_default(FullscreenState.from_str, internal, FullscreenState.NONE),
        parse_or_default(FullscreenState.from_str, client, FullscreenState.NONE),
    )


def _parse_tag_rule(payload: str) -> TagRule:
    if payload.startswith(("+", "-")):
        return TagRule(TagToggleState.from_str(payload[0]), payload[1:].strip())
    return TagRule(TagToggleState.TOGGLE, payload.strip())


def _size_limit_parser(rule_class: type) -> Callable[[str], WindowRule]:
    def parse(payload: str) -> WindowRule:
        width, height = _split_pair(payload)
        return rule_class(_uint_or_zero(width), _uint_or_zero(height))

    return parse


_RULE_PARSERS: dict[str, Callable[[str], WindowRule]] = {
    "center": lambda payload: CenterRule(payload.strip().lower() == "1"),
    "fullscreenstate": _parse_fullscreen_state_rule,
    "move": lambda payload: MoveRule(
        parse_or_default(HyprCoord.from_str, payload, HyprCoord(), "move")
    ),
    "size": lambda payload: SizeRule(
        parse_or_default(HyprSize.from_str, payload, HyprSize(), "size")
    ),
    "monitor": lambda payload: MonitorRule(
        parse_or_default(IdOrName.from_str, payload, ById(0), "monitor")
    ),
    "workspace": lambda payload: WorkspaceTargetRule(payload.strip()),
    "content": lambda payload: ContentRule(
        parse_or_default(ContentType.from_str, payload, ContentType.NONE, "content")
    ),
    "noclosefor": lambda payload: NoCloseForRule(_uint_or_zero(payload)),
    "tag": _parse_tag_rule,
    "maxsize": _size_limit_parser(MaxSizeRule),
    "minsize": _size_limit_parser(MinSizeRule),
}


class WindowRuleParameter:
    """A matcher selecting which windows a rule applies to."""

    @classmethod
    def from_str(cls, text: str) -> "WindowRuleParameter":
        """
        Parse a ``key:value`` matcher.

        The key is trimmed, the value is kept as written. Boolean matchers
        whose value is not a boolean match the true case.

        Raises:
            ConverterParseError: If the key is not a known matcher
        """
        if ":" in text:
            key, value = text.split(":", 1)
        else:
            key, value = text, ""
        key = key.strip()

        if key in MATCH_PARAMETERS:
            return MatchParameter(key, value)
        if key in BOOL_PARAMETERS:
            enabled = parse_bool(value)
            return BoolParameter(key, True if enabled is None else enabled)
        if key == "fullscreenState":
            internal, client = _split_pair(value)
            return FullscreenStateParameter(
                parse_or_default(
                    WindowRuleFullscreenState.from_str, internal, WindowRuleFullscreenState.ANY
                ),
                parse_or_default(
                    WindowRuleFullscreenState.from_str, client, WindowRuleFullscreenState.ANY
                ),
            )
        if key == "workspace":
            return WorkspaceParameter(parse_or_default(IdOrName.from_str, value, ById(0)))
        if key == "onworkspace":
            return OnWorkspaceParameter(IdOrNameOrWorkspaceSelector.from_str(value))
        if key == "content":
            return ContentParameter(
                parse_or_default(ContentType.from_str, value, ContentType.NONE)
            )
        raise ConverterParseError("WindowRuleParameter", text, f"unknown matcher '{key}'")


@frozen
class MatchParameter(WindowRuleParameter):
    """Match a window property against a value, e.g. ``class:^(firefox)$``."""

    key: str
    value: str = ""

    def __str__(self) -> str:
        return f"{self.key}:{self.value}"


@frozen
class BoolParameter(WindowRuleParameter):
    key: str
    value: bool = True

    def __str__(self) -> str:
        return f"{self.key}:{1 if self.value else 0}"


@frozen
class FullscreenStateParameter(WindowRuleParameter):
    internal: WindowRuleFullscreenState = WindowRuleFullscreenState.ANY
    client: WindowRuleFullscreenState = WindowRuleFullscreenState.ANY

    def __str__(self) -> str:
        return f"fullscreenState:{self.internal} {self.client}"


@frozen
class WorkspaceParameter(WindowRuleParameter):
    workspace: IdOrName = field(factory=ById)

    def __str__(self) -> str:
        return f"workspace:{self.workspace}"


@frozen
class OnWorkspaceParameter(WindowRuleParameter):
    workspace: IdOrNameOrWorkspaceSelector = field(factory=WorkspaceById)

    def __str__(self) -> str:
        return f"onworkspace:{self.workspace}"


@frozen
class ContentParameter(WindowRuleParameter):
    content: ContentType = ContentType.NONE

    def __str__(self) -> str:
        return f"content:{self.content}"


@frozen
class WindowRuleWithParameters:
    """A window rule line: one rule and the matchers it is restricted to."""

    rule: WindowRule = field(factory=WindowRule.default)
    parameters: tuple[WindowRuleParameter, ...] = field(converter=tuple, factory=tuple)

    @classmethod
    def from_str(cls, text: str) -> "WindowRuleWithParameters":
        """
        Parse a window rule line; never raises.

        An unknown rule becomes ``float`` and unknown matchers are dropped.
        """
        values = split_fields(text)
        rule = parse_or_default(WindowRule.from_str, values[0], WindowRule.default(), "rule")
        parameters = []
        for value in values[1:]:
            try:
                parameters.append(WindowRuleParameter.from_str(value))
            except ConverterParseError as e:
                logger.debug("Dropping window rule parameter: %s", e)
        return cls(rule, parameters)

    def __str__(self) -> str:
        return "".join([str(self.rule), *(f", {parameter}" for parameter in self.parameters)])
