"""Enum blocks and member declarations for inputs and subgraphs.

The enum order is the slot index the host uses at runtime, so entries are
always emitted in the order the study lists them.
"""

from __future__ import annotations

from collections.abc import Sequence

from studygen.naming import indent
from studygen.parser.models import Input, Output

INPUT_ENUM = "Inputs"
OUTPUT_ENUM = "Graphs"
INPUT_REF_TYPE = "SCInputRef"
OUTPUT_REF_TYPE = "SCSubgraphRef"


def _declarations(
    entries: Sequence[Input] | Sequence[Output],
    enum_name: str,
    ref_type: str,
    depth: int,
) -> list[str]:
    if not entries:
        return []

    prefix = indent(depth)
    lines = [f"{prefix}enum {enum_name} {{"]
    lines.extend(f"{indent(depth + 1)}{entry.enum_constant}," for entry in entries)
    lines.append(f"{prefix}}};")
    lines.extend(f"{prefix}{ref_type} {entry.variable_name};" for entry in entries)
    return lines


def input_declarations(inputs: Sequence[Input], depth: int = 1) -> list[str]:
    """``enum Inputs`` plus one ``SCInputRef`` member per input."""
    return _declarations(inputs, INPUT_ENUM, INPUT_REF_TYPE, depth)


def output_declarations(outputs: Sequence[Output], depth: int = 1) -> list[str]:
    """``enum Graphs`` plus one ``SCSubgraphRef`` member per subgraph."""
    return _declarations(outputs, OUTPUT_ENUM, OUTPUT_REF_TYPE, depth)
