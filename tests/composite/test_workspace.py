"""
Tests for workspace rule lines.

This module tests:
- Workspace type detection
- Rule parsing, including unknown keys and unparseable values
- Canonical formatting and its stability
"""

import logging
from typing import NamedTuple

from hyprdsl.composite import (
    NamedWorkspace,
    NumberedWorkspace,
    SelectorWorkspace,
    SpecialWorkspace,
    Workspace,
    WorkspaceRules,
    WorkspaceType,
)
from hyprdsl.composite.workspace import parse_workspace_rule
from hyprdsl.leaves import MonitorName, Orientation, Range
from hyprdsl.selectors import SelectorMonitor, SelectorRange


class WorkspaceCase(NamedTuple):
    """Test case for a workspace line."""

    name: str
    text: str
    formatted: str


WORKSPACE_LINES = [
    WorkspaceCase("bare_id", "3", "3"),
    WorkspaceCase(
        "monitor_and_default", "1, monitor:DP-1, default:true", "1, monitor:DP-1, default:true"
    ),
    WorkspaceCase(
        "written_in_rule_order",
        "name:web, rounding:false, bordersize:2, gapsout:10, gapsin:5",
        "name:web, gapsin:5, gapsout:10, bordersize:2, rounding:false",
    ),
    WorkspaceCase(
        "special_on_created_empty",
        "special:scratch, on-created-empty:[float] kitty",
        "special:scratch, on-created-empty:[float] kitty",
    ),
    WorkspaceCase(
        "selectors_persistent",
        "r[1-3]m[DP-1], persistent:true",
        "r[1-3]m[DP-1], persistent:true",
    ),
    WorkspaceCase(
        "layoutopt_orientation",
        "2, layoutopt:orientation:left",
        "2, layoutopt:orientation:left",
    ),
    WorkspaceCase(
        "orientation_without_prefix",
        "2, orientation:top",
        "2, layoutopt:orientation:top",
    ),
    WorkspaceCase("invalid_orientation_dropped", "2, layoutopt:orientation:diagonal", "2"),
    WorkspaceCase("unknown_rule_dropped", "4, foo:bar, shadow:off", "4, shadow:false"),
    WorkspaceCase("unparseable_bool_dropped", "4, border:maybe", "4"),
    WorkspaceCase("later_rule_wins", "1, gapsin:5, gapsin:7", "1, gapsin:7"),
    WorkspaceCase("default_name", "5, defaultName:main", "5, defaultName:main"),
    WorkspaceCase("negative_gaps", "6, gapsout:-4", "6, gapsout:-4"),
]


class TestWorkspaceType:
    """Tests for WorkspaceType.from_str."""

    def test_named(self):
        """Test the name: prefix."""
        assert WorkspaceType.from_str("name:web") == NamedWorkspace("web")

    def test_special(self):
        """Test the special: prefix."""
        assert WorkspaceType.from_str("special:scratch") == SpecialWorkspace("scratch")

    def test_numbered(self):
        """Test an unsigned integer is a workspace id."""
        assert WorkspaceType.from_str("7") == NumberedWorkspace(7)

    def test_selectors(self):
        """Test anything else is read as selectors."""
        assert WorkspaceType.from_str("r[1-3]m[DP-1]") == SelectorWorkspace(
            [SelectorRange(Range(1, 3)), SelectorMonitor(MonitorName("DP-1"))]
        )


class TestParseWorkspaceRule:
    """Tests for parse_workspace_rule."""

    def test_known_rule(self):
        """Test a known key returns its attribute and parsed value."""
        assert parse_workspace_rule("gapsin:5") == ("gaps_in", 5)

    def test_value_keeps_inner_colons(self):
        """Test only the first colon separates key from value."""
        assert parse_workspace_rule("on-created-empty:a:b") == ("on_created_empty", "a:b")

    def test_unparseable_value_is_none(self):
        """Test a value that does not parse comes back as None."""
        assert parse_workspace_rule("bordersize:wide") == ("border_size", None)

    def test_ignored_fields(self, caplog):
        """Test unknown keys and fields without a value are ignored."""
        with caplog.at_level(logging.DEBUG, logger="hyprdsl.composite.workspace"):
            assert parse_workspace_rule("bogus:1") is None
            assert parse_workspace_rule("persistent") is None
        assert "bogus" in caplog.text


class TestWorkspace:
    """Tests for whole workspace lines."""

    def test_lines_format_canonically(self):
        """Test each line formats to its canonical text."""
        for case in WORKSPACE_LINES:
            assert str(Workspace.from_str(case.text)) == case.formatted, case.name

    def test_formatting_is_stable(self):
        """Test formatting a parsed line and parsing it again changes nothing."""
        for case in WORKSPACE_LINES:
            once = str(Workspace.from_str(case.text))
            assert str(Workspace.from_str(once)) == once, case.name

    def test_parsed_rules(self):
        """Test rule values are typed."""
        workspace = Workspace.from_str("name:dev, monitor:DP-1, gapsin:5, default:yes, orientation:center")
        assert workspace.workspace_type == NamedWorkspace("dev")
        assert workspace.rules == WorkspaceRules(
            monitor="DP-1",
            default=True,
            gaps_in=5,
            layoutopt_orientation=Orientation.CENTER,
        )

    def test_default(self):
        """Test the default line is an empty selector list with no rules."""
        workspace = Workspace()
        assert workspace.rules.is_empty()
        assert str(workspace) == ""
        assert Workspace.from_str("") == workspace
