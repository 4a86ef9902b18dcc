"""Export ``data-pgc-define`` elements as standalone Razor components."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from bs4 import BeautifulSoup, NavigableString, Tag

from pinegrow_razor.config import ConverterConfig
from pinegrow_razor.core.markup import serialize
from pinegrow_razor.core.naming import pascalize
from pinegrow_razor.core.schema import ParameterSchema
from pinegrow_razor.core.slots import (
    DEFINE_ATTRIBUTE,
    DEFINE_NAME_ATTRIBUTE,
    AttributeSink,
    extract_editable,
)
from pinegrow_razor.models import ComponentSummary, OutputArtifact

logger = logging.getLogger(__name__)

TEMPLATE_EXTENSION = ".razor"


def _line_indent(element: Tag) -> str:
    previous = element.previous_sibling
    if type(previous) is NavigableString and "\n" in previous:
        tail = previous.rsplit("\n", 1)[1]
        if not tail.strip():
            return tail
    return ""


@dataclass
class ComponentDefinition:
    identifier: str
    display_name: str | None
    template_name: str
    element: Tag
    schema: ParameterSchema = field(default_factory=ParameterSchema)
    defaults: AttributeSink = field(default_factory=list)
    indent: str = ""

    def output_path(self, config: ConverterConfig) -> str:
        return str(PurePosixPath(config.component_directory) / f"{self.template_name}{TEMPLATE_EXTENSION}")

    def render(self) -> str:
        return f"{serialize(self.element, self.indent)}\n\n@code {{\n{self.schema.render()}\n}}\n"

    def to_artifact(self, config: ConverterConfig) -> OutputArtifact:
        return OutputArtifact(path=self.output_path(config), content=self.render())

    def summary(self, config: ConverterConfig) -> ComponentSummary:
        return ComponentSummary(name=self.template_name, path=self.output_path(config), parameters=self.schema.names)


def export_definitions(tree: BeautifulSoup, config: ConverterConfig) -> list[ComponentDefinition]:
    """Extract every component root, top-down, and leave a reference tag in its place.

    Definitions are returned unrendered: a nested component is replaced inside
    its ancestor's detached subtree after the ancestor was extracted, so the
    markup is only final once the whole pass is done.
    """
    definitions: list[ComponentDefinition] = []
    for element in tree.find_all(attrs={DEFINE_ATTRIBUTE: True}):
        identifier = str(element[DEFINE_ATTRIBUTE])
        display_name = str(element.get(DEFINE_NAME_ATTRIBUTE, "")).strip() or None
        template_name = pascalize(display_name or "") or pascalize(identifier)

        del element[DEFINE_ATTRIBUTE]
        if element.has_attr(DEFINE_NAME_ATTRIBUTE):
            del element[DEFINE_NAME_ATTRIBUTE]

        if not template_name:
            logger.info("Skipping unnamed component <%s>", element.name)
            continue

        definition = ComponentDefinition(identifier, display_name, template_name, element, indent=_line_indent(element))
        extract_editable("", element, definition.defaults, definition.schema)

        if element.parent is not None:
            attrs = dict(definition.defaults) if config.carry_defaults else {}
            element.replace_with(tree.new_tag(template_name, attrs=attrs))

        definitions.append(definition)
        logger.info("Generated component %s", definition.output_path(config))
    return definitions
