"""Main generation orchestrator.

Takes a ``Study`` and writes its two documents next to the study
description: the header, which is rewritten on every run, and the
implementation stub, which is created only when it does not exist yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from studygen.config import GeneratorConfig
from studygen.errors import OutputWriteError
from studygen.parser.models import Study

from .header_gen import HeaderGenerator
from .stub_gen import StubGenerator
from .templates import TemplateRenderer


@dataclass(frozen=True)
class GenerationResult:
    """What a generation run produced."""

    header_path: Path
    stub_path: Path
    stub_written: bool


class StudyGenerator:
    """Generation orchestrator for one study.

    Both documents are rendered in memory before anything touches the disk,
    so a rendering problem never leaves a half-updated pair of files.
    """

    def __init__(self, study: Study, config: GeneratorConfig | None = None) -> None:
        self.study = study
        self.config = config or GeneratorConfig()
        self.renderer = TemplateRenderer()
        self.header_gen = HeaderGenerator(self.renderer, self.config)
        self.stub_gen = StubGenerator(self.renderer, self.config)

    # -- Rendering ---------------------------------------------------------

    def render_header(self) -> str:
        return self.header_gen.render(self.study)

    def render_stub(self, header_name: str) -> str:
        return self.stub_gen.render(self.study, header_name)

    # -- Public API --------------------------------------------------------

    def generate(self, config_path: str | Path) -> GenerationResult:
        """Write the header and, if absent, the stub beside *config_path*.

        Args:
            config_path: Path of the study description. The outputs share
                its stem and directory.

        Returns:
            A ``GenerationResult`` naming both paths and whether the stub
            was created on this run.

        Raises:
            OutputWriteError: If either file cannot be written.
        """
        header_path = self.config.header_path(config_path)
        stub_path = self.config.source_path(config_path)

        header_text = self.render_header()
        stub_text = self.render_stub(header_path.name)

        _write_file(header_path, header_text)
        stub_written = _create_file(stub_path, stub_text)
        return GenerationResult(
            header_path=header_path,
            stub_path=stub_path,
            stub_written=stub_written,
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Write *content* to *path*, replacing any existing file."""
    try:
        with path.open("w", encoding="utf-8", newline="\n") as fh:
            fh.write(content)
    except OSError as exc:
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc


def _create_file(path: Path, content: str) -> bool:
    """Write *content* to *path* only if *path* does not exist.

    A file this call created but could not finish writing is removed again,
    so the next run regenerates it instead of keeping a truncated stub.

    Returns:
        ``True`` if the file was created, ``False`` if it already existed.
    """
    if path.exists():
        return False
    try:
        fh = path.open("x", encoding="utf-8", newline="\n")
    except FileExistsError:
        return False
    except OSError as exc:
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc
    try:
        with fh:
            fh.write(content)
    except OSError as exc:
        path.unlink(missing_ok=True)
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc
    return True
