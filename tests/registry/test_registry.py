"""
Tests for the converter registry.

This module tests:
- Lookup of built-in converters by name
- Parsing and formatting through the registry
- Variant descriptions
- Registration and unknown names
"""

import pytest

from hyprdsl.composite import MonitorDisabled
from hyprdsl.exceptions import ConverterParseError, UnknownConverterError
from hyprdsl.expressions import HyprCoord
from hyprdsl.leaves import Pixel
from hyprdsl.registry import Converter, ConverterRegistry, FieldDescriptor, VariantDescriptor

BUILTIN_NAMES = [
    "PixelOrPercent",
    "Range",
    "Position",
    "Scale",
    "Cm",
    "Orientation",
    "ContentType",
    "TagToggleState",
    "FullscreenState",
    "WindowRuleFullscreenState",
    "IdOrName",
    "MonitorSelector",
    "FontWeight",
    "Angle",
    "BezierCurve",
    "WorkspaceSelectorWindowCount",
    "WorkspaceSelectorNamed",
    "WorkspaceSelectorFullscreen",
    "WorkspaceSelectors",
    "IdOrNameOrWorkspaceSelector",
    "HyprCoord",
    "HyprSize",
    "HyprExpression",
    "HyprVariable",
    "Operator",
    "Workspace",
    "Monitor",
    "WindowRule",
    "WindowRuleParameter",
    "WindowRuleWithParameters",
]

# (converter, input, canonical output)
CANONICAL_TEXT = [
    ("WorkspaceSelectors", "m-1v3", "m[-1]w[v3]"),
    ("HyprCoord", "onscreen 100%-50 50%", "onscreen 100%-50 50%"),
    ("HyprSize", ">10 <20%", ">10 <20%"),
    ("HyprExpression", "monitor_w*0.5-10", "((monitor_w*0.5)-10)"),
    ("Workspace", "1, gapsin:5, monitor:DP-1", "1, monitor:DP-1, gapsin:5"),
    ("Monitor", "DP-1, preferred, auto, 2", "DP-1, preferred, auto, 2.00"),
    ("WindowRuleWithParameters", "FLOAT, class:kitty", "float, class:kitty"),
    ("Scale", "1.5", "1.50"),
    ("Position", "AUTO-LEFT", "auto-left"),
]


class TestBuiltinConverters:
    """Tests for the default registry contents."""

    def test_every_builtin_registered(self, registry):
        """Test each built-in converter can be looked up by name."""
        for name in BUILTIN_NAMES:
            assert name in registry, name
            assert registry.get(name).name == name

    @pytest.mark.parametrize("name,text,expected", CANONICAL_TEXT)
    def test_parse_then_format(self, registry, name, text, expected):
        """Test text parsed and formatted through the registry is canonical."""
        assert registry.format(name, registry.parse(name, text)) == expected

    def test_parse_returns_typed_values(self, registry):
        """Test the registry hands back the converter's own values."""
        assert registry.parse("HyprCoord", "1 2") == HyprCoord(Pixel(1), Pixel(2))
        assert registry.parse("Monitor", "DP-1, disable").monitor == MonitorDisabled()

    def test_rejecting_converter_raises(self, registry):
        """Test rejection errors propagate from the converter."""
        with pytest.raises(ConverterParseError):
            registry.parse("HyprExpression", "(1+")


class TestDescribe:
    """Tests for variant descriptions."""

    def test_selector_variants(self, registry):
        """Test the selector list describes all seven predicate kinds."""
        names = [variant.name for variant in registry.describe("WorkspaceSelectors")]
        assert names == [
            "None",
            "Range",
            "Special",
            "Named",
            "Monitor",
            "WindowCount",
            "Fullscreen",
        ]

    def test_payload_fields(self, registry):
        """Test payload fields report their kind and arity."""
        (coord,) = registry.describe("HyprCoord")
        assert coord.arity == 6
        assert coord.payload[0] == FieldDescriptor(name="x", kind="PixelOrPercent")

    def test_keyword_variants_have_no_payload(self, registry):
        """Test enum converters list their keywords as empty variants."""
        variants = registry.describe("Orientation")
        assert [variant.name for variant in variants] == ["left", "right", "top", "bottom", "center"]
        assert all(variant.arity == 0 for variant in variants)

    def test_window_rule_variants(self, registry):
        """Test window rules list flag keywords and payload rules."""
        variants = {variant.name: variant for variant in registry.describe("WindowRule")}
        assert variants["float"].arity == 0
        assert variants["tag"].arity == 2
        assert variants["move"].payload[0].kind == "HyprCoord"

    def test_types_without_variants(self, registry):
        """Test converters without variants describe as empty."""
        assert registry.describe("Angle") == []


class TestRegistration:
    """Tests for registering and looking up converters."""

    def test_unknown_name_raises(self, registry):
        """Test looking up an unregistered name lists what is available."""
        with pytest.raises(UnknownConverterError) as excinfo:
            registry.get("Gradient")
        assert excinfo.value.name == "Gradient"
        assert "HyprCoord" in excinfo.value.available
        assert "Gradient" in str(excinfo.value)

    def test_unknown_name_is_key_error(self, registry):
        """Test lookups can be guarded like dictionary lookups."""
        with pytest.raises(KeyError):
            registry.parse("Gradient", "x")

    def test_register_custom_converter(self):
        """Test a converter registered by hand is usable."""
        registry = ConverterRegistry()
        registry.register(
            Converter(
                "Upper",
                str.upper,
                variants=(VariantDescriptor(name="Upper"),),
            )
        )
        assert registry.list_converters() == ["Upper"]
        assert registry.parse("Upper", "abc") == "ABC"
        assert registry.format("Upper", "ABC") == "ABC"
        assert registry.describe("Upper")[0].arity == 0

    def test_register_replaces(self, registry):
        """Test registering an existing name replaces the converter."""
        registry.register(Converter("Angle", lambda text: text))
        assert registry.parse("Angle", "anything") == "anything"
