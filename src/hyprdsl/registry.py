"""
Converter registry for editors that work with converters by name.

An editor that only knows a setting's type name ("HyprCoord", "Workspace")
looks the converter up here to parse the setting's text, write it back, and
learn which variants the type has and what payload each one carries.
"""

from attrs import frozen
from pydantic import BaseModel, Field

from hyprdsl.composite.monitor import format_monitor, parse_monitor
from hyprdsl.composite.window_rule import (
    BOOL_PARAMETERS,
    FLAG_RULES,
    MATCH_PARAMETERS,
    PAYLOAD_RULES,
    WindowRule,
    WindowRuleParameter,
    WindowRuleWithParameters,
)
from hyprdsl.composite.workspace import Workspace
from hyprdsl.core.types import FieldKind, FormatFunction, ParseFunction
from hyprdsl.exceptions import UnknownConverterError
from hyprdsl.expressions import HyprCoord, HyprExpression, HyprSize, HyprVariable, Operator
from hyprdsl.leaves import (
    Angle,
    BezierCurve,
    Cm,
    ContentType,
    FontWeight,
    FullscreenState,
    IdOrName,
    MonitorSelector,
    Orientation,
    PixelOrPercent,
    Position,
    Range,
    Scale,
    TagToggleState,
    WindowRuleFullscreenState,
)
from hyprdsl.selectors import (
    IdOrNameOrWorkspaceSelector,
    WorkspaceSelectorFullscreen,
    WorkspaceSelectorNamed,
    WorkspaceSelectorWindowCount,
    format_workspace_selectors,
    parse_workspace_selectors,
)


class FieldDescriptor(BaseModel):
    """One payload field of a variant, e.g. the ``x`` of a coordinate."""

    name: str
    kind: FieldKind = Field(
        description="Primitive kind (str, int, float, bool) or a registered converter name"
    )


class VariantDescriptor(BaseModel):
    """One variant of a converter's type and the payload it carries."""

    name: str
    payload: list[FieldDescriptor] = Field(default_factory=list)

    @property
    def arity(self) -> int:
        return len(self.payload)


@frozen
class Converter:
    name: str
    parse: ParseFunction
    format: FormatFunction = str
    variants: tuple[VariantDescriptor, ...] = ()


def _variant(name: str, *fields: tuple[str, FieldKind]) -> VariantDescriptor:
    return VariantDescriptor(
        name=name,
        payload=[
            FieldDescriptor(name=field_name, kind=kind) for field_name, kind in fields
        ],
    )


def _keyword_variants(keywords) -> tuple[VariantDescriptor, ...]:
    return tuple(_variant(str(keyword)) for keyword in keywords)


class ConverterRegistry:
    """Mutable mapping of converter name -> ``Converter``.

    Notes:
      - Registering a name that already exists replaces the converter.
      - The registry holds no parsed values; every call parses afresh.
    """

    def __init__(self, converters: list[Converter] | None = None):
        self._converters: dict[str, Converter] = {}
        for converter in converters or []:
            self.register(converter)

    def register(self, converter: Converter) -> None:
        """Add a converter, replacing any registered under the same name.

        Params:
            converter: Converter to store under ``converter.name``.
        """
        self._converters[converter.name] = converter

    def get(self, name: str) -> Converter:
        """Get a converter by its registered name.

        Params:
            name: Converter name, usually the type name (e.g. "HyprCoord").

        Returns:
            The registered converter.

        Raises:
            UnknownConverterError: If the name is not registered.
        """
        if name not in self._converters:
            raise UnknownConverterError(name, self.list_converters())
        return self._converters[name]

    def parse(self, name: str, text: str):
        """Parse ``text`` with the named converter.

        Raises:
            UnknownConverterError: If the name is not registered.
            ConverterParseError: If the converter rejects the text.
        """
        return self.get(name).parse(text)

    def format(self, name: str, value) -> str:
        return self.get(name).format(value)

    def describe(self, name: str) -> list[VariantDescriptor]:
        """List the variants of the named converter's type.

        Returns:
            Variant descriptors; empty for types without variants.
        """
        return list(self.get(name).variants)

    def list_converters(self) -> list[str]:
        return list(self._converters.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._converters


def _builtin_converters() -> list[Converter]:
    pixel_or_percent = (
        _variant("Pixel", ("value", "int")),
        _variant("Percent", ("value", "float")),
    )
    coord_fields = (
        ("x", "PixelOrPercent"),
        ("y", "PixelOrPercent"),
        ("x_sub", "int"),
        ("y_sub", "int"),
        ("under_cursor", "bool"),
        ("on_screen", "bool"),
    )
    selector_variants = (
        _variant("None"),
        _variant("Range", ("range", "Range")),
        _variant("Special", ("is_special", "bool")),
        _variant("Named", ("named", "WorkspaceSelectorNamed")),
        _variant("Monitor", ("monitor", "MonitorSelector")),
        _variant("WindowCount", ("window_count", "WorkspaceSelectorWindowCount")),
        _variant("Fullscreen", ("state", "WorkspaceSelectorFullscreen")),
    )
    window_rule_variants = (
        _keyword_variants(FLAG_RULES)
        + _keyword_variants(PAYLOAD_RULES)
        + (
            _variant("center", ("respect_reserved_area", "bool")),
            _variant(
                "fullscreenstate",
                ("internal", "FullscreenState"),
                ("client", "FullscreenState"),
            ),
            _variant("move", ("coord", "HyprCoord")),
            _variant("size", ("size", "HyprSize")),
            _variant("monitor", ("monitor", "IdOrName")),
            _variant("workspace", ("workspace", "str")),
            _variant("content", ("content", "ContentType")),
            _variant("noclosefor", ("milliseconds", "int")),
            _variant("tag", ("state", "TagToggleState"), ("tag", "str")),
            _variant("maxsize", ("width", "int"), ("height", "int")),
            _variant("minsize", ("width", "int"), ("height", "int")),
        )
    )
    parameter_variants = (
        tuple(_variant(key, ("value", "str")) for key in MATCH_PARAMETERS)
        + tuple(_variant(key, ("value", "bool")) for key in BOOL_PARAMETERS)
        + (
            _variant(
                "fullscreenState",
                ("internal", "WindowRuleFullscreenState"),
                ("client", "WindowRuleFullscreenState"),
            ),
            _variant("workspace", ("workspace", "IdOrName")),
            _variant("onworkspace", ("workspace", "IdOrNameOrWorkspaceSelector")),
            _variant("content", ("content", "ContentType")),
        )
    )

    return [
        Converter("PixelOrPercent", PixelOrPercent.from_str, variants=pixel_or_percent),
        Converter(
            "Range",
            Range.from_str,
            variants=(_variant("Range", ("start", "int"), ("end", "int")),),
        ),
        Converter("Position", Position.from_str),
        Converter("Scale", Scale.from_str),
        Converter("Cm", Cm.from_str, variants=_keyword_variants(Cm)),
        Converter(
            "Orientation", Orientation.from_str, variants=_keyword_variants(Orientation)
        ),
        Converter(
            "ContentType", ContentType.from_str, variants=_keyword_variants(ContentType)
        ),
        Converter("TagToggleState", TagToggleState.from_str),
        Converter("FullscreenState", FullscreenState.from_str),
        Converter("WindowRuleFullscreenState", WindowRuleFullscreenState.from_str),
        Converter(
            "IdOrName",
            IdOrName.from_str,
            variants=(_variant("Id", ("id", "int")), _variant("Name", ("name", "str"))),
        ),
        Converter(
            "MonitorSelector",
            MonitorSelector.from_str,
            variants=(
                _variant("All"),
                _variant("Name", ("name", "str")),
                _variant("Description", ("description", "str")),
                _variant("Relative", ("offset", "int")),
            ),
        ),
        Converter("FontWeight", FontWeight.from_str),
        Converter("Angle", Angle.from_str),
        Converter("BezierCurve", BezierCurve.from_str),
        Converter(
            "WorkspaceSelectorWindowCount",
            WorkspaceSelectorWindowCount.from_str,
            variants=(
                _variant("Single", ("flags", "str"), ("count", "int")),
                _variant(
                    "Range",
                    ("flags", "str"),
                    ("range_start", "int"),
                    ("range_end", "int"),
                ),
            ),
        ),
        Converter(
            "WorkspaceSelectorNamed",
            WorkspaceSelectorNamed.from_str,
            variants=(
                _variant("IsNamed", ("is_named", "bool")),
                _variant("Starts", ("prefix", "str")),
                _variant("Ends", ("suffix", "str")),
            ),
        ),
        Converter("WorkspaceSelectorFullscreen", WorkspaceSelectorFullscreen.from_str),
        Converter(
            "WorkspaceSelectors",
            parse_workspace_selectors,
            format_workspace_selectors,
            variants=selector_variants,
        ),
        Converter(
            "IdOrNameOrWorkspaceSelector",
            IdOrNameOrWorkspaceSelector.from_str,
            variants=(
                _variant("Id", ("id", "int")),
                _variant("Name", ("name", "str")),
                _variant("WorkspaceSelector", ("selectors", "WorkspaceSelectors")),
            ),
        ),
        Converter(
            "HyprCoord",
            HyprCoord.from_str,
            variants=(_variant("HyprCoord", *coord_fields),),
        ),
        Converter("HyprSize", HyprSize.from_str),
        Converter(
            "HyprExpression",
            HyprExpression.from_str,
            variants=(
                _variant("Uint", ("value", "int")),
                _variant("Float", ("value", "float")),
                _variant("Variable", ("variable", "HyprVariable")),
                _variant(
                    "Formula",
                    ("left", "HyprExpression"),
                    ("operator", "Operator"),
                    ("right", "HyprExpression"),
                ),
            ),
        ),
        Converter(
            "HyprVariable", HyprVariable.from_str, variants=_keyword_variants(HyprVariable)
        ),
        Converter("Operator", Operator.from_str, variants=_keyword_variants(Operator)),
        Converter("Workspace", Workspace.from_str),
        Converter(
            "Monitor",
            parse_monitor,
            format_monitor,
            variants=(
                _variant("Enabled", ("state", "str")),
                _variant("Disabled"),
                _variant(
                    "AddReserved",
                    ("top", "int"),
                    ("bottom", "int"),
                    ("left", "int"),
                    ("right", "int"),
                ),
            ),
        ),
        Converter("WindowRule", WindowRule.from_str, variants=window_rule_variants),
        Converter(
            "WindowRuleParameter", WindowRuleParameter.from_str, variants=parameter_variants
        ),
        Converter("WindowRuleWithParameters", WindowRuleWithParameters.from_str),
    ]


def default_registry() -> ConverterRegistry:
    """Build a registry holding every built-in converter."""
    return ConverterRegistry(_builtin_converters())
