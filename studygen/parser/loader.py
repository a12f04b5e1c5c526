"""Study description loading.

Reads a JSON study description from disk and validates it into a
:class:`~studygen.parser.models.Study`. Every failure is translated into
the studygen error taxonomy before any output file is touched.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from studygen.errors import ConfigMalformedError, ConfigNotFoundError
from studygen.utils import load_json

from .models import Study


def load_study(path: str | Path) -> Study:
    """Load and validate the study description at *path*.

    Args:
        path: Path to the JSON study description.

    Returns:
        A validated ``Study``.

    Raises:
        ConfigNotFoundError: The file is missing, not a regular file, or
            unreadable.
        ConfigMalformedError: The content is not valid JSON, lacks a
            required field, carries an unknown key, or names an unknown
            input ``kind``.
    """
    config_path = Path(path)
    if not config_path.is_file():
        reason = "not a regular file" if config_path.exists() else "file not found"
        raise ConfigNotFoundError(config_path, reason)

    try:
        data = load_json(config_path)
    except json.JSONDecodeError as exc:
        raise ConfigMalformedError(
            config_path, [f"line {exc.lineno} column {exc.colno}: {exc.msg}"]
        ) from exc
    except UnicodeDecodeError as exc:
        raise ConfigMalformedError(config_path, [f"not UTF-8 text: {exc.reason}"]) from exc
    except OSError as exc:
        raise ConfigNotFoundError(config_path, exc.strerror or str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigMalformedError(config_path, ["<root>: expected a JSON object"])
    return parse_study(data, source=config_path)


def parse_study(data: dict[str, Any], source: str | Path = "<memory>") -> Study:
    """Validate an already-decoded study mapping.

    Args:
        data: Decoded JSON object.
        source: Where *data* came from, used in error messages.

    Raises:
        ConfigMalformedError: When validation fails.
    """
    try:
        return Study.model_validate(data)
    except ValidationError as exc:
        raise ConfigMalformedError(source, format_validation_errors(exc)) from exc


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Render pydantic errors as ``"<dotted.location>: <message>"`` strings."""
    problems: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return problems
