"""Builder for the ``@code`` block of a generated Razor component."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

STRING_TYPE = "string"
FRAGMENT_TYPE = "RenderFragment"

_INDENT = "    "


@dataclass(frozen=True)
class ParameterDeclaration:
    name: str
    type_name: str


@dataclass(frozen=True)
class RepeatDeclaration:
    name: str
    schema: ParameterSchema

    @property
    def item_type(self) -> str:
        return f"{self.name}Item"


class ParameterSchema:
    """Append-only list of declarations, kept in discovery order.

    A schema owned by a repeat group renders as the body of the item record
    type, so its properties carry no ``[Parameter]`` attribute.
    """

    def __init__(self, record: str | None = None) -> None:
        self.record = record
        self.entries: list[ParameterDeclaration | RepeatDeclaration] = []

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def add_parameter(self, name: str, type_name: str = STRING_TYPE) -> ParameterDeclaration:
        if name in self.names:
            logger.debug("Duplicate parameter %s in %s", name, self.record or "component")
        declaration = ParameterDeclaration(name, type_name)
        self.entries.append(declaration)
        return declaration

    def add_repeat_group(self, name: str) -> ParameterSchema:
        nested = ParameterSchema(record=f"{name}Item")
        self.entries.append(RepeatDeclaration(name, nested))
        return nested

    def render(self, depth: int = 1) -> str:
        """Render the declarations, one blank line apart, indented ``depth`` levels."""
        pad = _INDENT * depth
        blocks: list[str] = []
        for entry in self.entries:
            if isinstance(entry, RepeatDeclaration):
                blocks.append(self._render_repeat(entry, pad, depth))
            elif self.record is None:
                blocks.append(f"{pad}[Parameter]\n{pad}public {entry.type_name} {entry.name} {{ get; set; }}")
            else:
                blocks.append(f"{pad}public {entry.type_name} {entry.name} {{ get; set; }}")
        return "\n\n".join(blocks)

    def _render_repeat(self, entry: RepeatDeclaration, pad: str, depth: int) -> str:
        lines = []
        if self.record is None:
            lines.append(f"{pad}[Parameter]")
        lines.append(f"{pad}public List<{entry.item_type}> {entry.name} {{ get; set; }}")
        lines.append("")
        lines.append(f"{pad}public class {entry.item_type}")
        lines.append(f"{pad}{{")
        body = entry.schema.render(depth + 1)
        if body:
            lines.append(body)
        lines.append(f"{pad}}}")
        return "\n".join(lines)
