"""
Composite config lines built from the leaf, selector and coordinate converters.

All parsers here accept any input and substitute defaults for fields that do
not parse.
"""

from hyprdsl.composite.monitor import (
    Monitor,
    MonitorAddReserved,
    MonitorDisabled,
    MonitorEnabled,
    MonitorRecord,
    MonitorState,
    format_monitor,
    parse_monitor,
)
from hyprdsl.composite.window_rule import (
    BoolParameter,
    CenterRule,
    ContentParameter,
    ContentRule,
    FlagRule,
    FullscreenStateParameter,
    FullscreenStateRule,
    MatchParameter,
    MaxSizeRule,
    MinSizeRule,
    MonitorRule,
    MoveRule,
    NoCloseForRule,
    OnWorkspaceParameter,
    PayloadRule,
    SizeRule,
    TagRule,
    WindowRule,
    WindowRuleParameter,
    WindowRuleWithParameters,
    WorkspaceParameter,
    WorkspaceTargetRule,
)
from hyprdsl.composite.workspace import (
    NamedWorkspace,
    NumberedWorkspace,
    SelectorWorkspace,
    SpecialWorkspace,
    Workspace,
    WorkspaceRules,
    WorkspaceType,
    parse_workspace_rule,
)

__all__ = [
    "WorkspaceType",
    "NamedWorkspace",
    "SpecialWorkspace",
    "NumberedWorkspace",
    "SelectorWorkspace",
    "WorkspaceRules",
    "Workspace",
    "parse_workspace_rule",
    "MonitorState",
    "Monitor",
    "MonitorEnabled",
    "MonitorDisabled",
    "MonitorAddReserved",
    "MonitorRecord",
    "parse_monitor",
    "format_monitor",
    "WindowRule",
    "FlagRule",
    "CenterRule",
    "FullscreenStateRule",
    "MoveRule",
    "SizeRule",
    "MonitorRule",
    "WorkspaceTargetRule",
    "ContentRule",
    "NoCloseForRule",
    "TagRule",
    "MaxSizeRule",
    "MinSizeRule",
    "PayloadRule",
    "WindowRuleParameter",
    "MatchParameter",
    "BoolParameter",
    "FullscreenStateParameter",
    "WorkspaceParameter",
    "OnWorkspaceParameter",
    "ContentParameter",
    "WindowRuleWithParameters",
]
