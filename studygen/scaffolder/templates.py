"""Jinja2 template rendering for the generated C++ documents.

Provides the TemplateRenderer class which loads the document shells
(``header.h.j2``, ``stub.cpp.j2``) from the ``studygen/scaffolder/templates/``
directory. The variable parts of each document are built in Python and
handed to the template as lists of ready-made lines.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from studygen.naming import class_name, include_guard_token


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Jinja2 shells of the generated header and stub.

    Autoescaping is off (the output is C++, not HTML) and block tags do not
    leave stray blank lines, so the rendered text is exactly what the
    template lines spell out.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["class_name"] = class_name
        self.env.filters["include_guard"] = include_guard_token

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"header.h.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)
