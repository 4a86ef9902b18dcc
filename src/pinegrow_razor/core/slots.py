"""Turn Pinegrow editable regions into Razor parameters.

An editable element carries ``data-pgc-edit="name[target, ...]"``. Each target
is either ``content`` (the inner markup) or the name of an attribute. Binding a
target rewrites the element to reference ``@Name`` and declares a parameter in
the component's :class:`ParameterSchema`. Children marked with
``data-pgc-repeat`` declare their parameters on a nested item record instead.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from bs4 import Tag

from pinegrow_razor.core.markup import element_children
from pinegrow_razor.core.naming import pascalize
from pinegrow_razor.core.schema import FRAGMENT_TYPE, STRING_TYPE, ParameterSchema

logger = logging.getLogger(__name__)

EDIT_ATTRIBUTE = "data-pgc-edit"
REPEAT_ATTRIBUTE = "data-pgc-repeat"
DEFINE_ATTRIBUTE = "data-pgc-define"
DEFINE_NAME_ATTRIBUTE = "data-pgc-define-name"

CONTENT_TARGET = "content"
NO_CONTENT_TARGET = "no_content"

_BINDING = re.compile(r"^\s*([^\[\]]+?)\s*\[([^\[\]]*)\]\s*$")

AttributeSink = list[tuple[str, str]]


class MalformedBindingError(ValueError):
    """Raised for an edit attribute that is not ``name[targets]``."""


@dataclass(frozen=True)
class Binding:
    name: str
    targets: tuple[str, ...]

    @property
    def binds_content(self) -> bool:
        return CONTENT_TARGET in self.targets


def parse_binding(value: str) -> Binding:
    """Parse ``name[t1, t2]``; the ``no_content`` marker is dropped from the targets."""
    match = _BINDING.match(value)
    if match is None:
        raise MalformedBindingError(f"expected 'name[targets]', got {value!r}")
    targets = [target.strip() for target in match.group(2).split(",") if target.strip()]
    if not targets:
        raise MalformedBindingError(f"no targets in {value!r}")
    return Binding(
        name=match.group(1).strip(),
        targets=tuple(target for target in targets if target != NO_CONTENT_TARGET),
    )


def _is_plain_default(value: str) -> bool:
    return bool(value.strip()) and "\n" not in value


def _bind(
    scope: str,
    element: Tag,
    binding: Binding,
    attribute_sink: AttributeSink | None,
    schema: ParameterSchema,
) -> None:
    for target in binding.targets:
        if target == CONTENT_TARGET:
            has_children = bool(element_children(element))
            default = "" if has_children else element.get_text()
            parameter = pascalize(binding.name)
            type_name = FRAGMENT_TYPE if has_children else STRING_TYPE
            element.string = f"@{parameter}"
        else:
            default = str(element.get(target, ""))
            parameter = pascalize(f"{binding.name} {target}" if binding.binds_content else binding.name)
            type_name = STRING_TYPE
            element[target] = f"@{parameter}"

        schema.add_parameter(parameter, type_name)
        logger.debug("Bound %s to %s in %s", target, parameter, scope or "component")
        if attribute_sink is not None and _is_plain_default(default):
            attribute_sink.append((parameter, default.strip()))


def extract_editable(
    scope: str,
    element: Tag,
    attribute_sink: AttributeSink | None,
    schema: ParameterSchema,
) -> None:
    """Bind ``element`` and its descendants, declaring parameters on ``schema``.

    ``attribute_sink`` collects plain-text defaults for parameters declared on
    ``schema`` itself; repeat groups get no sink. Descendants that define their
    own component are left for the exporter.
    """
    edit_value = str(element.get(EDIT_ATTRIBUTE, ""))
    if edit_value.strip():
        try:
            binding = parse_binding(edit_value)
        except MalformedBindingError as exc:
            logger.debug("Ignoring binding on <%s>: %s", element.name, exc)
        else:
            _bind(scope, element, binding, attribute_sink, schema)

    repeats: dict[str, ParameterSchema] = {}
    for child in element_children(element):
        if child.has_attr(DEFINE_ATTRIBUTE):
            continue
        group = str(child.get(REPEAT_ATTRIBUTE, "")).strip()
        if not group:
            extract_editable(scope, child, attribute_sink, schema)
            continue
        nested = repeats.get(group)
        if nested is None:
            nested = schema.add_repeat_group(pascalize(group))
            repeats[group] = nested
        extract_editable(f"{scope}.{pascalize(group)}".lstrip("."), child, None, nested)
