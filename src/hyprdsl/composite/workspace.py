"""
Workspace rule lines: ``workspace = <type>, <key>:<value>, ...``.

Parsing never fails. Unknown keys are ignored and values that do not parse
leave their rule unset, so a line formats back without them.
"""

import logging
from collections.abc import Callable
from typing import Any

from attrs import asdict, field, frozen

from hyprdsl.core.text_utils import (
    format_bool,
    parse_bool,
    parse_int,
    parse_or_default,
    parse_uint,
    split_fields,
)
from hyprdsl.leaves.states import Orientation
from hyprdsl.selectors.workspace_selector import (
    WorkspaceSelector,
    format_workspace_selectors,
    parse_workspace_selectors,
)

logger = logging.getLogger(__name__)

LAYOUTOPT_PREFIX = "layoutopt:"


class WorkspaceType:
    """Which workspace(s) a line applies to."""

    @classmethod
    def from_str(
        cls, text: str
    ) -> "NamedWorkspace | SpecialWorkspace | NumberedWorkspace | SelectorWorkspace":
        """Parse "name:<n>", "special:<n>", an id, or a selector expression."""
        if text.startswith("name:"):
            return NamedWorkspace(text[len("name:") :])
        if text.startswith("special:"):
            return SpecialWorkspace(text[len("special:") :])
        number = parse_uint(text)
        if number is not None:
            return NumberedWorkspace(number)
        return SelectorWorkspace(parse_workspace_selectors(text))


@frozen
class NamedWorkspace(WorkspaceType):
    name: str = ""

    def __str__(self) -> str:
        return f"name:{self.name}"


@frozen
class SpecialWorkspace(WorkspaceType):
    name: str = ""

    def __str__(self) -> str:
        return f"special:{self.name}"


@frozen
class NumberedWorkspace(WorkspaceType):
    number: int = 1

    def __str__(self) -> str:
        return str(self.number)


@frozen
class SelectorWorkspace(WorkspaceType):
    selectors: tuple[WorkspaceSelector, ...] = field(converter=tuple, factory=tuple)

    def __str__(self) -> str:
        return format_workspace_selectors(self.selectors)


def _parse_orientation(value: str) -> Orientation | None:
    return parse_or_default(Orientation.from_str, value, None, "orientation")


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return format_bool(value)
    return str(value)


# Rule key -> (attribute, value parser). Also the order rules are written in.
_RULES: dict[str, tuple[str, Callable[[str], Any]]] = {
    "monitor": ("monitor", str),
    "default": ("default", parse_bool),
    "gapsin": ("gaps_in", parse_int),
    "gapsout": ("gaps_out", parse_int),
    "bordersize": ("border_size", parse_int),
    "border": ("border", parse_bool),
    "shadow": ("shadow", parse_bool),
    "rounding": ("rounding", parse_bool),
    "decorate": ("decorate", parse_bool),
    "persistent": ("persistent", parse_bool),
    "on-created-empty": ("on_created_empty", str),
    "defaultName": ("default_name", str),
    "orientation": ("layoutopt_orientation", _parse_orientation),
}


@frozen
class WorkspaceRules:
    """Per-workspace overrides; ``None`` means the rule is not set."""

    monitor: str | None = None
    default: bool | None = None
    gaps_in: int | None = None
    gaps_out: int | None = None
    border_size: int | None = None
    border: bool | None = None
    shadow: bool | None = None
    rounding: bool | None = None
    decorate: bool | None = None
    persistent: bool | None = None
    on_created_empty: str | None = None
    default_name: str | None = None
    layoutopt_orientation: Orientation | None = None

    @classmethod
    def from_fields(cls, rule_fields: list[str]) -> "WorkspaceRules":
        """
        Build rules from ``key:value`` fields, later fields overriding earlier ones.

        Params:
            rule_fields: Trimmed fields, each optionally prefixed "layoutopt:"

        Returns:
            The rules that were recognised
        """
        values: dict[str, Any] = {}
        for rule in rule_fields:
            parsed = parse_workspace_rule(rule)
            if parsed is not None:
                attribute, value = parsed
                values[attribute] = value
        return cls(**values)

    def is_empty(self) -> bool:
        return all(value is None for value in asdict(self, recurse=False).values())

    def __str__(self) -> str:
        rules = []
        for key, (attribute, _) in _RULES.items():
            value = getattr(self, attribute)
            if value is None:
                continue
            if attribute == "layoutopt_orientation":
                key = f"{LAYOUTOPT_PREFIX}{key}"
            rules.append(f"{key}:{_format_value(value)}")
        return ", ".join(rules)


def parse_workspace_rule(text: str) -> tuple[str, Any] | None:
    """
    Parse one ``[layoutopt:]key:value`` field.

    Returns:
        (attribute name, parsed value), where the value is None if it did not
        parse; None if the key is unknown or the field has no ":"
    """
    if text.startswith(LAYOUTOPT_PREFIX):
        text = text[len(LAYOUTOPT_PREFIX) :]
    if ":" not in text:
        logger.debug("Ignoring workspace rule without a value: '%s'", text)
        return None
    key, value = text.split(":", 1)
    rule = _RULES.get(key.strip())
    if rule is None:
        logger.debug("Ignoring unknown workspace rule '%s'", key)
        return None
    attribute, parser = rule
    return attribute, parser(value.strip())


@frozen
class Workspace:
    """A workspace rule line: the workspace(s) it targets and the rules set."""

    workspace_type: WorkspaceType = field(factory=SelectorWorkspace)
    rules: WorkspaceRules = field(factory=WorkspaceRules)

    @classmethod
    def from_str(cls, text: str) -> "Workspace":
        """Parse a workspace line; never raises."""
        values = split_fields(text)
        return cls(
            workspace_type=WorkspaceType.from_str(values[0]),
            rules=WorkspaceRules.from_fields(values[1:]),
        )

    def __str__(self) -> str:
        if self.rules.is_empty():
            return str(self.workspace_type)
        return f"{self.workspace_type}, {self.rules}"
