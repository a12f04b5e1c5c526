"""Default-initialisation statements for study inputs and subgraphs.

Each builder returns the C++ statements (without indentation) that go into
the generated ``defaults()`` method for one input or one subgraph.
"""

from __future__ import annotations

from studygen.naming import quote
from studygen.parser.models import (
    BooleanType,
    ColorType,
    DataSeriesType,
    FloatType,
    Input,
    IntegerType,
    MovingAverageType,
    Output,
    SelectionType,
)

DATA_SERIES_PREFIX = "SC_"


# ---------------------------------------------------------------------------
# Literal rendering
# ---------------------------------------------------------------------------

def render_int(value: int) -> str:
    return str(value)


def render_float(value: float) -> str:
    """Float literal with the ``f`` suffix, e.g. ``2.5f`` or ``10.0f``."""
    return f"{float(value)!r}f"


def render_bool(value: bool) -> str:
    return "true" if value else "false"


def render_data_series(token: str) -> str:
    """Curated series constant, e.g. ``hl_avg`` -> ``SC_HL_AVG``."""
    return f"{DATA_SERIES_PREFIX}{token.upper()}"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

def input_default(input_: Input) -> list[str]:
    """Statements that initialise *input_* followed by its description.

    Raises:
        TypeError: If the input carries a type outside the supported set.
    """
    var = input_.variable_name
    name = quote(input_.name)
    kind = input_.type

    if isinstance(kind, IntegerType):
        lines = [f"input_default_int({var}, {name}, {render_int(kind.default)});"]
    elif isinstance(kind, FloatType):
        lines = [f"input_default_float({var}, {name}, {render_float(kind.default)});"]
    elif isinstance(kind, BooleanType):
        lines = [f"input_default_bool({var}, {name}, {render_bool(kind.default)});"]
    elif isinstance(kind, ColorType):
        lines = [f"input_default_color({var}, {name}, {kind.default});"]
    elif isinstance(kind, MovingAverageType):
        lines = [
            f"{var}.Name = {name};",
            f"{var}.SetMovAvgType({kind.default});",
        ]
    elif isinstance(kind, SelectionType):
        lines = [f"input_default_select({var}, {name}, {quote(kind.default)});"]
    elif isinstance(kind, DataSeriesType):
        lines = [
            f"input_default_data({var}, {name}, {render_data_series(kind.default)});"
        ]
    else:
        raise TypeError(f"unsupported input type {type(kind).__name__}")

    lines.append(f"{var}.SetDescription({quote(input_.description)});")
    return lines


# ---------------------------------------------------------------------------
# Subgraphs
# ---------------------------------------------------------------------------

def subgraph_default(output: Output) -> list[str]:
    """Statements that configure one subgraph.

    Name, draw style and primary colour are always set. Line width,
    secondary colour and auto-colouring only appear when they differ from
    the host defaults.
    """
    var = output.variable_name
    lines = [
        f"subgraph_default({var}, {quote(output.name)}, "
        f"{output.draw_style.constant}, {output.color});"
    ]
    if output.width != 1:
        lines.append(f"{var}.LineWidth = {output.width};")
    if output.second_color is not None:
        lines.append(f"{var}.SecondaryColor = {output.second_color};")
        lines.append(f"{var}.SecondaryColorUsed = 1;")
    if output.auto_color is not None:
        lines.append(f"{var}.AutoColoring = {output.auto_color.constant};")
    return lines
