"""studygen command-line entry point.

Reads one study description, renders the header and the implementation
stub, and writes them next to the description.

Usage::

    studygen studies/TestStudy.json
    python -m studygen.pipeline studies/TestStudy.json
"""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import ValidationError

from studygen import __version__
from studygen.config import GeneratorConfig
from studygen.errors import StudyGenError
from studygen.parser import load_study
from studygen.scaffolder import GenerationResult, StudyGenerator
from studygen.utils import (
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def run(config_path: str | Path, config: GeneratorConfig | None = None) -> GenerationResult:
    """Load *config_path* and generate its documents.

    Raises:
        StudyGenError: On any read, decode or write failure. Nothing is
            written when loading fails.
    """
    study = load_study(config_path)
    return StudyGenerator(study, config).generate(config_path)


def _report(result: GenerationResult) -> None:
    rows = {str(result.header_path): "written"}
    if result.stub_written:
        rows[str(result.stub_path)] = "written"
    else:
        rows[str(result.stub_path)] = "kept (already exists)"
        print_warning(
            f"Implementation file already exists, leaving it untouched: {result.stub_path}"
        )
    print_summary_table(rows, title="Generated files")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``studygen`` / ``python -m studygen.pipeline``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="studygen",
        description="Generate a C++ study header and implementation stub from a JSON description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  studygen studies/TestStudy.json\n"
            "    -> studies/TestStudy.h   (always rewritten)\n"
            "    -> studies/TestStudy.cpp (created only if missing)\n"
        ),
    )
    parser.add_argument(
        "config",
        help="Path to the study description (JSON)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    try:
        config = GeneratorConfig.from_env()
    except ValidationError as exc:
        print_error(f"Error: invalid STUDYGEN_* environment settings:\n{exc}")
        sys.exit(1)

    try:
        result = run(args.config, config)
    except StudyGenError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    _report(result)
    print_success("Generation completed successfully!")


if __name__ == "__main__":
    main()
