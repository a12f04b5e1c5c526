"""Identifier derivation for generated C++ code.

Pure functions that map labels and display names onto the identifier forms
the generated header needs. No collision detection is performed: two inputs
with the same label produce the same field and enum names.
"""

from __future__ import annotations

import re

INPUT = "input"
OUTPUT = "output"

# kind -> (variable prefix, enum prefix)
_PREFIXES: dict[str, tuple[str, str]] = {
    INPUT: ("in_", "IN_"),
    OUTPUT: ("sg_", "SG_"),
}

TAB_WIDTH = 4

_WHITESPACE = re.compile(r"\s+")


def _prefixes(kind: str) -> tuple[str, str]:
    try:
        return _PREFIXES[kind]
    except KeyError:
        raise ValueError(f"unknown identifier kind {kind!r}") from None


def variable_name(label: str, kind: str) -> str:
    """Field name: ``in_<label>`` for inputs, ``sg_<label>`` for outputs."""
    return f"{_prefixes(kind)[0]}{label}"


def enum_constant(label: str, kind: str) -> str:
    """Enum constant: ``IN_<LABEL>_IDX`` or ``SG_<LABEL>_IDX``."""
    return f"{_prefixes(kind)[1]}{label.upper()}_IDX"


def class_name(study_name: str) -> str:
    """Study name with every whitespace character removed."""
    return _WHITESPACE.sub("", study_name)


def include_guard_token(study_name: str) -> str:
    """Study name with spaces replaced by underscores, uppercased."""
    return study_name.replace(" ", "_").upper()


def escape_string(text: str) -> str:
    """Escape *text* for a double-quoted C++ literal.

    Only ``"`` is escaped (as ``\\"``); backslashes and control characters
    pass through unchanged.
    """
    return text.replace('"', '\\"')


def quote(text: str) -> str:
    """*text* escaped and wrapped in double quotes."""
    return f'"{escape_string(text)}"'


def indent(depth: int) -> str:
    """Leading whitespace for nesting level *depth*."""
    return " " * (TAB_WIDTH * depth)
