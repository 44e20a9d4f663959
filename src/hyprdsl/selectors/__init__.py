"""
Workspace selector grammar: predicates, the greedy list parser and its formatter.
"""

from hyprdsl.selectors.window_count import (
    WindowCountRange,
    WindowCountSingle,
    WorkspaceSelectorWindowCount,
    WorkspaceSelectorWindowCountFlags,
)
from hyprdsl.selectors.workspace_selector import (
    IdOrNameOrWorkspaceSelector,
    IsNamed,
    NameEndsWith,
    NameStartsWith,
    SelectorFullscreen,
    SelectorMonitor,
    SelectorNamed,
    SelectorNone,
    SelectorRange,
    SelectorSpecial,
    SelectorWindowCount,
    WorkspaceById,
    WorkspaceByName,
    WorkspaceBySelectors,
    WorkspaceSelector,
    WorkspaceSelectorFullscreen,
    WorkspaceSelectorNamed,
    format_workspace_selectors,
    parse_single_selector,
    parse_workspace_selectors,
)

__all__ = [
    "WorkspaceSelectorWindowCountFlags",
    "WorkspaceSelectorWindowCount",
    "WindowCountSingle",
    "WindowCountRange",
    "WorkspaceSelectorNamed",
    "IsNamed",
    "NameStartsWith",
    "NameEndsWith",
    "WorkspaceSelectorFullscreen",
    "WorkspaceSelector",
    "SelectorNone",
    "SelectorRange",
    "SelectorSpecial",
    "SelectorNamed",
    "SelectorMonitor",
    "SelectorWindowCount",
    "SelectorFullscreen",
    "parse_single_selector",
    "parse_workspace_selectors",
    "format_workspace_selectors",
    "IdOrNameOrWorkspaceSelector",
    "WorkspaceById",
    "WorkspaceByName",
    "WorkspaceBySelectors",
]
