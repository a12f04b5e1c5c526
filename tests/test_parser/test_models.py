"""Tests for the study data model (studygen.parser.models).

Covers:
- Defaults of Study and Output
- camelCase aliases and population by attribute name
- Discriminated input types
- Derived naming helpers
- Draw style / auto colour constants
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

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

pytestmark = pytest.mark.unit


class TestStudyModel:
    def test_defaults(self):
        study = Study(name="TestStudy")
        assert study.description == ""
        assert study.region == 0
        assert study.autoloop is True
        assert study.enable_extra_data is False
        assert study.pointer_events is False
        assert study.private_class_name is None
        assert study.inputs == []
        assert study.outputs == []

    def test_camel_case_aliases(self):
        study = Study.model_validate(
            {
                "name": "S",
                "enableExtraData": True,
                "pointerEvents": True,
                "privateClassName": "Impl",
            }
        )
        assert study.enable_extra_data is True
        assert study.pointer_events is True
        assert study.private_class_name == "Impl"

    def test_populate_by_attribute_name(self):
        study = Study(name="S", enable_extra_data=True, private_class_name="Impl")
        assert study.enable_extra_data is True
        assert study.private_class_name == "Impl"

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            Study.model_validate({"description": "no name"})

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            Study.model_validate({"name": "S", "colour": "red"})

    def test_empty_name_is_not_rejected(self):
        assert Study(name="").name == ""

    def test_order_is_preserved(self, full_study: Study):
        assert [i.label for i in full_study.inputs] == [
            "len", "mult", "show", "band_color", "ma_type", "mode", "source",
        ]
        assert [o.label for o in full_study.outputs] == ["upper", "lower", "work"]

    def test_derived_names(self):
        study = Study(name="My  Fancy\tStudy")
        assert study.class_name == "MyFancyStudy"
        assert study.include_guard_token == "MY__FANCY\tSTUDY"

    def test_model_layer_does_not_load_scaffolder(self):
        root = Path(__file__).resolve().parents[2]
        code = (
            "import sys, studygen.parser.models; "
            "assert 'studygen.scaffolder' not in sys.modules"
        )
        env = {**os.environ, "PYTHONPATH": str(root)}
        subprocess.run([sys.executable, "-c", code], check=True, env=env)


class TestInputTypes:
    @pytest.mark.parametrize(
        "payload, expected_cls",
        [
            ({"kind": "int", "default": 3}, IntegerType),
            ({"kind": "float", "default": 1.5}, FloatType),
            ({"kind": "bool", "default": False}, BooleanType),
            ({"kind": "color", "default": "COLOR_RED"}, ColorType),
            ({"kind": "moving_average", "default": "MOVAVGTYPE_SIMPLE"}, MovingAverageType),
            ({"kind": "selection", "default": "A;B"}, SelectionType),
            ({"kind": "data", "default": "last"}, DataSeriesType),
        ],
    )
    def test_discriminated_variants(self, payload: dict[str, Any], expected_cls: type):
        input_ = Input.model_validate({"label": "x", "name": "X", "type": payload})
        assert isinstance(input_.type, expected_cls)

    def test_integer_default_widened_to_float(self):
        input_ = Input.model_validate(
            {"label": "x", "name": "X", "type": {"kind": "float", "default": 2}}
        )
        assert input_.type.default == 2.0
        assert isinstance(input_.type.default, float)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Input.model_validate({"label": "x", "name": "X", "type": {"kind": "date", "default": 1}})

    def test_missing_default_rejected(self):
        with pytest.raises(ValidationError):
            Input.model_validate({"label": "x", "name": "X", "type": {"kind": "int"}})

    def test_wrong_default_type_rejected(self):
        with pytest.raises(ValidationError):
            Input.model_validate(
                {"label": "x", "name": "X", "type": {"kind": "int", "default": "ten"}}
            )

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_float_rejected(self, value: float):
        with pytest.raises(ValidationError):
            FloatType(default=value)

    @pytest.mark.parametrize(
        "model, value",
        [
            (IntegerType, "10"),
            (IntegerType, True),
            (FloatType, "2.5"),
            (BooleanType, "off"),
            (BooleanType, 1),
        ],
    )
    def test_numeric_defaults_are_not_coerced(self, model: type, value: Any):
        with pytest.raises(ValidationError):
            model(default=value)

    def test_input_naming(self):
        input_ = Input(label="ma_len", name="Length", type=IntegerType(default=1))
        assert input_.variable_name == "in_ma_len"
        assert input_.enum_constant == "IN_MA_LEN_IDX"


class TestOutputModel:
    def test_defaults(self):
        output = Output(label="ma1")
        assert output.name == ""
        assert output.color == "COLOR_WHITE"
        assert output.second_color is None
        assert output.width == 1
        assert output.style is DrawStyle.IGNORE
        assert output.auto_color is None

    def test_aliases(self):
        output = Output.model_validate(
            {"label": "a", "secondColor": "COLOR_RED", "autoColor": "base_graph"}
        )
        assert output.second_color == "COLOR_RED"
        assert output.auto_color is AutoColor.BASE_GRAPH

    def test_unknown_style_rejected(self):
        with pytest.raises(ValidationError):
            Output.model_validate({"label": "a", "style": "dots"})

    def test_output_naming(self):
        output = Output(label="ma1", name="MA")
        assert output.variable_name == "sg_ma1"
        assert output.enum_constant == "SG_MA1_IDX"

    def test_hidden_output_draws_nothing(self):
        assert Output(label="a", name="", style=DrawStyle.LINE).draw_style is DrawStyle.IGNORE

    def test_named_output_keeps_style(self):
        assert Output(label="a", name="A", style=DrawStyle.BAR).draw_style is DrawStyle.BAR


class TestConstants:
    def test_every_draw_style_has_a_constant(self):
        for style in DrawStyle:
            assert style.constant.startswith("DRAWSTYLE_")

    def test_every_auto_color_has_a_constant(self):
        for mode in AutoColor:
            assert mode.constant.startswith("AUTOCOLOR_")

    def test_selected_constants(self):
        assert DrawStyle.LINE.constant == "DRAWSTYLE_LINE"
        assert DrawStyle.TRANSPARENT_BACKGROUND.constant == "DRAWSTYLE_BACKGROUND_TRANSPARENT"
        assert AutoColor.SLOPE.constant == "AUTOCOLOR_SLOPE"
