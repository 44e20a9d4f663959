"""
Tests for window-count flags and counts.
"""

from typing import NamedTuple

import pytest

from hyprdsl.exceptions import ConverterParseError
from hyprdsl.selectors import (
    WindowCountRange,
    WindowCountSingle,
    WorkspaceSelectorWindowCount,
    WorkspaceSelectorWindowCountFlags,
)


class WindowCountCase(NamedTuple):
    """Test case for window-count parsing."""

    name: str
    text: str
    expected: object
    formatted: str


VISIBLE = WorkspaceSelectorWindowCountFlags(visible=True)
TILED_VISIBLE = WorkspaceSelectorWindowCountFlags(tiled=True, visible=True)
NO_FLAGS = WorkspaceSelectorWindowCountFlags()

VALID_COUNTS = [
    WindowCountCase("single_without_flags", "3", WindowCountSingle(NO_FLAGS, 3), "3"),
    WindowCountCase("single_with_flag", "v3", WindowCountSingle(VISIBLE, 3), "v3"),
    WindowCountCase(
        "range_with_flags", "tv1-3", WindowCountRange(TILED_VISIBLE, 1, 3), "tv1-3"
    ),
    WindowCountCase(
        "flags_are_reordered", "vt2", WindowCountSingle(TILED_VISIBLE, 2), "tv2"
    ),
    WindowCountCase(
        "invalid_flags_reset", "xz4", WindowCountSingle(NO_FLAGS, 4), "4"
    ),
    WindowCountCase(
        "dashes_around_count_ignored", "v-2-", WindowCountSingle(VISIBLE, 2), "v2"
    ),
    WindowCountCase("zero", "0", WindowCountSingle(NO_FLAGS, 0), "0"),
]


class TestWorkspaceSelectorWindowCountFlags:
    """Tests for the flag set."""

    def test_all_flags_format_in_fixed_order(self):
        """Test flags always format as t, f, g, v, p."""
        flags = WorkspaceSelectorWindowCountFlags.from_str("pvgft")
        assert str(flags) == "tfgvp"

    def test_no_flags_format_empty(self):
        """Test the default flag set formats as nothing."""
        assert str(WorkspaceSelectorWindowCountFlags()) == ""

    def test_invalid_flag_raises(self):
        """Test a letter outside tfgvp is rejected."""
        with pytest.raises(ConverterParseError):
            WorkspaceSelectorWindowCountFlags.from_str("tx")


class TestWorkspaceSelectorWindowCount:
    """Tests for window-count parsing."""

    def test_valid_counts(self):
        """Test each valid count parses and formats canonically."""
        for case in VALID_COUNTS:
            value = WorkspaceSelectorWindowCount.from_str(case.text)
            assert value == case.expected, case.name
            assert str(value) == case.formatted, case.name

    @pytest.mark.parametrize("text", ["", "v", "tv", "v1-x", "v-", "v4294967296"])
    def test_invalid_counts_raise(self, text):
        """Test missing, malformed and overflowing counts are rejected."""
        with pytest.raises(ConverterParseError):
            WorkspaceSelectorWindowCount.from_str(text)
