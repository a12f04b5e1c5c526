"""Pydantic v2 models describing a study.

A ``Study`` is the in-memory form of one study description: its identity,
its typed inputs and its output channels (subgraphs). The JSON document uses
camelCase keys; Python code may populate models by attribute name as well.

Input types form a closed set discriminated by the ``kind`` key::

    {"label": "len", "name": "Length", "type": {"kind": "int", "default": 10}}

Numeric and boolean defaults are validated strictly: ``"10"`` is not an int,
``1`` is not a bool, and ``Infinity`` or ``NaN`` is not a usable float.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from studygen.naming import (
    INPUT,
    OUTPUT,
    class_name,
    enum_constant,
    include_guard_token,
    variable_name,
)


class _Model(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class DrawStyle(str, Enum):
    """How the host renders a subgraph."""
    IGNORE = "ignore"
    LINE = "line"
    BAR = "bar"
    TEXT = "text"
    BACKGROUND = "background"
    TRANSPARENT_BACKGROUND = "transparent_background"
    CANDLE_FILL = "candle_fill"

    @property
    def constant(self) -> str:
        """The host's ``DRAWSTYLE_*`` constant for this style."""
        return _DRAW_STYLE_CONSTANTS[self]


class AutoColor(str, Enum):
    """Automatic colouring mode of a subgraph."""
    NONE = "none"
    GRADIENT = "gradient"
    BASE_GRAPH = "base_graph"
    SLOPE = "slope"

    @property
    def constant(self) -> str:
        """The host's ``AUTOCOLOR_*`` constant for this mode."""
        return _AUTO_COLOR_CONSTANTS[self]


_DRAW_STYLE_CONSTANTS: dict[DrawStyle, str] = {
    DrawStyle.IGNORE: "DRAWSTYLE_IGNORE",
    DrawStyle.LINE: "DRAWSTYLE_LINE",
    DrawStyle.BAR: "DRAWSTYLE_BAR",
    DrawStyle.TEXT: "DRAWSTYLE_TEXT",
    DrawStyle.BACKGROUND: "DRAWSTYLE_BACKGROUND",
    DrawStyle.TRANSPARENT_BACKGROUND: "DRAWSTYLE_BACKGROUND_TRANSPARENT",
    DrawStyle.CANDLE_FILL: "DRAWSTYLE_COLOR_BAR_CANDLE_FILL",
}

_AUTO_COLOR_CONSTANTS: dict[AutoColor, str] = {
    AutoColor.NONE: "AUTOCOLOR_NONE",
    AutoColor.GRADIENT: "AUTOCOLOR_GRADIENT",
    AutoColor.BASE_GRAPH: "AUTOCOLOR_BASEGRAPH",
    AutoColor.SLOPE: "AUTOCOLOR_SLOPE",
}


# ---------------------------------------------------------------------------
# Input types
# ---------------------------------------------------------------------------

class IntegerType(_Model):
    """Whole-number input."""
    kind: Literal["int"] = "int"
    default: int = Field(..., strict=True)


class FloatType(_Model):
    """Floating-point input."""
    kind: Literal["float"] = "float"
    default: float = Field(..., strict=True, allow_inf_nan=False)


class BooleanType(_Model):
    """Yes/no input."""
    kind: Literal["bool"] = "bool"
    default: bool = Field(..., strict=True)


class ColorType(_Model):
    """Colour input. ``default`` is a raw C++ expression such as ``RGB(0, 255, 0)``."""
    kind: Literal["color"] = "color"
    default: str


class MovingAverageType(_Model):
    """Moving-average kind input. ``default`` is a symbolic ``MOVAVGTYPE_*`` constant."""
    kind: Literal["moving_average"] = "moving_average"
    default: str


class SelectionType(_Model):
    """Custom selection list. ``default`` is the option list, e.g. ``"Open;High;Low"``."""
    kind: Literal["selection"] = "selection"
    default: str


class DataSeriesType(_Model):
    """One of the host's curated price/volume series, e.g. ``last`` or ``hl_avg``."""
    kind: Literal["data"] = "data"
    default: str


InputType = Annotated[
    Union[
        IntegerType,
        FloatType,
        BooleanType,
        ColorType,
        MovingAverageType,
        SelectionType,
        DataSeriesType,
    ],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Inputs & outputs
# ---------------------------------------------------------------------------

class Input(_Model):
    """A user-configurable study parameter."""
    label: str = Field(..., description="Machine key; must be unique within the study")
    name: str = Field(..., description="Display label shown to the end user")
    description: str = Field(default="", description="Help text")
    type: InputType = Field(..., description="Type and default value")

    @property
    def variable_name(self) -> str:
        return variable_name(self.label, INPUT)

    @property
    def enum_constant(self) -> str:
        return enum_constant(self.label, INPUT)


class Output(_Model):
    """A rendered data channel (subgraph).

    An empty ``name`` means the channel is allocated but never drawn.
    """
    label: str = Field(..., description="Machine key; must be unique within the study")
    name: str = Field(default="", description="Display name, empty for hidden channels")
    color: str = Field(default="COLOR_WHITE", description="Primary colour expression")
    second_color: Optional[str] = Field(
        default=None, alias="secondColor", description="Secondary colour expression"
    )
    width: int = Field(default=1, description="Line width")
    style: DrawStyle = Field(default=DrawStyle.IGNORE, description="Draw style")
    auto_color: Optional[AutoColor] = Field(
        default=None, alias="autoColor", description="Automatic colouring mode"
    )

    @property
    def variable_name(self) -> str:
        return variable_name(self.label, OUTPUT)

    @property
    def enum_constant(self) -> str:
        return enum_constant(self.label, OUTPUT)

    @property
    def draw_style(self) -> DrawStyle:
        """Style actually emitted: hidden channels are always ``IGNORE``."""
        if not self.name:
            return DrawStyle.IGNORE
        return self.style


# ---------------------------------------------------------------------------
# Study
# ---------------------------------------------------------------------------

class Study(_Model):
    """Top-level description of one generated study."""
    name: str = Field(..., description="Display name; also the source of the class name")
    description: str = Field(default="", description="Free-text study description")
    region: int = Field(default=0, description="Chart region index")
    autoloop: bool = Field(default=True, description="Let the host drive the bar loop")
    enable_extra_data: bool = Field(
        default=False,
        alias="enableExtraData",
        description="Maintain additional chart data arrays",
    )
    pointer_events: bool = Field(
        default=False, alias="pointerEvents", description="Receive pointer events"
    )
    private_class_name: Optional[str] = Field(
        default=None,
        alias="privateClassName",
        description="Nested type forward-declared in the private section",
    )
    inputs: list[Input] = Field(default_factory=list, description="Ordered inputs")
    outputs: list[Output] = Field(default_factory=list, description="Ordered subgraphs")

    @property
    def class_name(self) -> str:
        """C++ class name: the study name with all whitespace removed."""
        return class_name(self.name)

    @property
    def include_guard_token(self) -> str:
        """Include-guard token: spaces to underscores, uppercased."""
        return include_guard_token(self.name)
