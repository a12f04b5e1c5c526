"""Study description parsing.

Quick usage::

    from studygen.parser import load_study

    study = load_study("TestStudy.json")
    print(study.class_name, [i.label for i in study.inputs])
"""

from studygen.parser.loader import load_study, parse_study
from studygen.parser.models import (
    AutoColor,
    BooleanType,
    ColorType,
    DataSeriesType,
    DrawStyle,
    FloatType,
    Input,
    IntegerType,
    MovingAverageType,
    Output,
    SelectionType,
    Study,
)

__all__ = [
    "AutoColor",
    "BooleanType",
    "ColorType",
    "DataSeriesType",
    "DrawStyle",
    "FloatType",
    "Input",
    "IntegerType",
    "MovingAverageType",
    "Output",
    "SelectionType",
    "Study",
    "load_study",
    "parse_study",
]
