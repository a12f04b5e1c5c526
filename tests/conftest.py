"""Shared pytest fixtures for the studygen test suite.

Provides reusable fixtures for:
- The reference ``TestStudy`` model used throughout the docs
- A study exercising every input type and subgraph option
- Study descriptions written to temporary JSON files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from studygen.parser.models import Study


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Raw study descriptions
# ---------------------------------------------------------------------------

@pytest.fixture
def test_study_dict() -> dict[str, Any]:
    """The minimal ``TestStudy`` description: one int input, one line subgraph."""
    return {
        "name": "TestStudy",
        "description": "A new study from generated code",
        "inputs": [
            {
                "label": "len",
                "name": "Length",
                "description": "Lookback length.",
                "type": {"kind": "int", "default": 1},
            },
        ],
        "outputs": [
            {"label": "ma1", "name": "Moving Average", "style": "line"},
        ],
    }


@pytest.fixture
def full_study_dict() -> dict[str, Any]:
    """A study using every input kind, every optional subgraph field and all flags."""
    return {
        "name": "Full Study",
        "description": 'Study with "quoted" text',
        "region": 1,
        "autoloop": False,
        "enableExtraData": True,
        "pointerEvents": True,
        "privateClassName": "State",
        "inputs": [
            {"label": "len", "name": "Length", "type": {"kind": "int", "default": 14}},
            {"label": "mult", "name": "Multiplier", "type": {"kind": "float", "default": 2.5}},
            {"label": "show", "name": "Show Bands", "type": {"kind": "bool", "default": True}},
            {
                "label": "band_color",
                "name": "Band Color",
                "type": {"kind": "color", "default": "RGB(0, 255, 0)"},
            },
            {
                "label": "ma_type",
                "name": "Moving Average Type",
                "description": "The type of the moving average.",
                "type": {"kind": "moving_average", "default": "MOVAVGTYPE_EXPONENTIAL"},
            },
            {
                "label": "mode",
                "name": "Mode",
                "type": {"kind": "selection", "default": "Fast;Slow"},
            },
            {
                "label": "source",
                "name": "Input Data",
                "type": {"kind": "data", "default": "hl_avg"},
            },
        ],
        "outputs": [
            {
                "label": "upper",
                "name": "Upper Band",
                "color": "RGB(0, 128, 255)",
                "secondColor": "RGB(255, 0, 0)",
                "width": 2,
                "style": "line",
                "autoColor": "slope",
            },
            {"label": "lower", "name": "Lower Band", "style": "bar"},
            {"label": "work", "name": ""},
        ],
    }


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

@pytest.fixture
def test_study(test_study_dict: dict[str, Any]) -> Study:
    return Study.model_validate(test_study_dict)


@pytest.fixture
def full_study(full_study_dict: dict[str, Any]) -> Study:
    return Study.model_validate(full_study_dict)


# ---------------------------------------------------------------------------
# Files on disk
# ---------------------------------------------------------------------------

@pytest.fixture
def write_study(tmp_path: Path) -> Callable[..., Path]:
    """Factory that writes a study description to ``tmp_path`` and returns its path."""

    def _write(data: dict[str, Any] | str, filename: str = "TestStudy.json") -> Path:
        path = tmp_path / filename
        content = data if isinstance(data, str) else json.dumps(data, indent=2)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def study_file(write_study: Callable[..., Path], test_study_dict: dict[str, Any]) -> Path:
    """``TestStudy.json`` written to a temp directory."""
    return write_study(test_study_dict)
