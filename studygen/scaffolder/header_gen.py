"""Study header generation.

Builds the header document for a study: include guard, class declaration,
input and subgraph declarations, the ``defaults()`` method, the constructor
that binds every member to its runtime slot, the lifecycle hook declarations
and the optional private nested-type forward declaration.

The variable parts are assembled here as line lists; ``header.h.j2`` supplies
the fixed shell around them.
"""

from __future__ import annotations

from studygen.config import GeneratorConfig
from studygen.naming import indent, quote
from studygen.parser.models import Study

from .declarations import input_declarations, output_declarations
from .defaults import input_default, subgraph_default
from .templates import TemplateRenderer

HEADER_TEMPLATE = "header.h.j2"

POINTER_EVENTS_STATEMENT = "sc.ReceivePointerEvents = ACS_RECEIVE_POINTER_EVENTS_ALWAYS;"

LIFECYCLE_DECLARATIONS = [
    "bool debug_enabled() const override { return true; }",
    "void on_call() override;",
    "void on_update(int from, int to) override;",
]


class HeaderGenerator:
    """Renders the class header for a ``Study``."""

    def __init__(
        self,
        renderer: TemplateRenderer,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.renderer = renderer
        self.config = config or GeneratorConfig()

    def render(self, study: Study) -> str:
        """Return the complete header text for *study*.

        The output is a pure function of *study* and the config. Malformed
        names are not rejected; they flow into the identifiers unchanged.
        """
        context = {
            "study": study,
            "config": self.config,
            "sections": self.sections(study),
        }
        return self.renderer.render(HEADER_TEMPLATE, context)

    # -- Sections ----------------------------------------------------------

    def sections(self, study: Study) -> list[list[str]]:
        """Class body sections, in document order, empty ones omitted."""
        sections = [
            input_declarations(study.inputs),
            output_declarations(study.outputs),
            self.defaults_method(study),
            self.constructor(study),
            [f"{indent(1)}{line}" for line in LIFECYCLE_DECLARATIONS],
            self.private_section(study),
        ]
        return [section for section in sections if section]

    def defaults_method(self, study: Study, depth: int = 1) -> list[str]:
        """The ``defaults()`` override that configures the study on load."""
        body = [
            f"sc.GraphName = {quote(study.name)};",
            f"sc.Description = {quote(study.description)};",
            f"sc.GraphRegion = {study.region};",
            f"sc.AutoLoop = {int(study.autoloop)};",
            f"sc.MaintainAdditionalChartDataArrays = {int(study.enable_extra_data)};",
        ]
        if study.pointer_events:
            body.append(POINTER_EVENTS_STATEMENT)
        for input_ in study.inputs:
            body.extend(input_default(input_))
        for output in study.outputs:
            body.extend(subgraph_default(output))

        prefix = indent(depth)
        lines = [f"{prefix}void defaults() override {{"]
        lines.extend(f"{indent(depth + 1)}{statement}" for statement in body)
        lines.append(f"{prefix}}}")
        return lines

    def constructor(self, study: Study, depth: int = 1) -> list[str]:
        """``public:`` constructor binding inputs, then subgraphs, then the base."""
        bindings = [
            f"{input_.variable_name}(sc.Input[{input_.enum_constant}])"
            for input_ in study.inputs
        ]
        bindings.extend(
            f"{output.variable_name}(sc.Subgraph[{output.enum_constant}])"
            for output in study.outputs
        )
        bindings.append(f"{self.config.base_class}(sc) {{}}")

        lines = [
            f"{indent(depth - 1)}public:",
            f"{indent(depth)}explicit {study.class_name}(SCStudyInterfaceRef sc) :",
        ]
        # Every binding but the last (the base initializer) needs a comma.
        lines.extend(f"{indent(depth + 1)}{binding}," for binding in bindings[:-1])
        lines.append(f"{indent(depth + 1)}{bindings[-1]}")
        return lines

    def private_section(self, study: Study, depth: int = 1) -> list[str]:
        """Forward declaration of the nested private type, if the study has one."""
        if not study.private_class_name:
            return []
        return [
            f"{indent(depth - 1)}private:",
            f"{indent(depth)}class {study.private_class_name};",
        ]
