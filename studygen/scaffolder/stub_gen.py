"""Implementation stub generation.

The stub is where the study author writes the actual calculation, so it is
rendered once and never regenerated over an existing file (see
:meth:`studygen.scaffolder.generator.StudyGenerator.generate`).
"""

from __future__ import annotations

from studygen.config import GeneratorConfig
from studygen.parser.models import Study

from .templates import TemplateRenderer

STUB_TEMPLATE = "stub.cpp.j2"


class StubGenerator:
    """Renders the implementation stub for a ``Study``."""

    def __init__(
        self,
        renderer: TemplateRenderer,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.renderer = renderer
        self.config = config or GeneratorConfig()

    def render(self, study: Study, header_name: str) -> str:
        """Return the stub text.

        Args:
            study: The study being generated.
            header_name: File name of the generated header, used in the
                ``#include`` line (e.g. ``"TestStudy.h"``).
        """
        context = {
            "study": study,
            "config": self.config,
            "header_name": header_name,
        }
        return self.renderer.render(STUB_TEMPLATE, context)
