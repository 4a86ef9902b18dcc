"""Classify Pinegrow documents and emit Razor pages or partial components."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath

from bs4 import BeautifulSoup

from pinegrow_razor.config import ConverterConfig
from pinegrow_razor.core.components import TEMPLATE_EXTENSION, ComponentDefinition, export_definitions
from pinegrow_razor.core.markup import escape_razor, named, parse, serialize, serialize_contents
from pinegrow_razor.core.naming import kebaberize, pascalize
from pinegrow_razor.core.rewrite import rewrite_checkboxes, rewrite_forms
from pinegrow_razor.models import OutputArtifact

logger = logging.getLogger(__name__)

_SOURCE_EXTENSION = ".html"


class DocumentKind(str, Enum):
    PAGE = "page"
    PARTIAL = "partial"


@dataclass
class DocumentResult:
    source: str
    kind: DocumentKind
    output_path: str
    route: str | None = None
    components: list[ComponentDefinition] = field(default_factory=list)
    artifacts: list[OutputArtifact] = field(default_factory=list)


def _posix(relative_path: str) -> PurePosixPath:
    return PurePosixPath(relative_path.replace("\\", "/"))


def classify(tree: BeautifulSoup) -> DocumentKind:
    return DocumentKind.PAGE if tree.find(named("html")) is not None else DocumentKind.PARTIAL


def page_body(tree: BeautifulSoup) -> str:
    """Inner markup of ``<body>``, else of ``<html>``, else the whole tree."""
    html = tree.find(named("html"))
    if html is None:
        return serialize(tree)
    body = html.find(named("body"))
    return serialize_contents(body if body is not None else html)


def derive_route(relative_path: str) -> str:
    """``about-us/Team.html`` -> ``/about-us/team``."""
    url = relative_path.replace("\\", "/")
    if url.endswith(_SOURCE_EXTENSION):
        url = url[: -len(_SOURCE_EXTENSION)]
    return "/" + "/".join(kebaberize(part) for part in url.strip("/").split("/") if part)


def output_path(relative_path: str, kind: DocumentKind, config: ConverterConfig) -> str:
    source = _posix(relative_path)
    root = config.component_directory if kind is DocumentKind.PARTIAL else config.page_directory
    name = pascalize(source.stem) or source.stem
    return str(PurePosixPath(root) / source.parent / f"{name}{TEMPLATE_EXTENSION}")


def render_page(body: str, route: str, layout: str | None) -> str:
    header = [f"@layout {layout}"] if layout else []
    header.append(f'@page "{route}"')
    return "\n".join(header) + f"\n\n{body}\n\n@code {{\n\n}}\n"


def render_partial(body: str) -> str:
    return f"{body}\n\n@code {{\n\n}}\n"


def convert_document(text: str, relative_path: str, config: ConverterConfig) -> DocumentResult:
    """Convert one Pinegrow document into its Razor artifacts.

    Component artifacts come first, followed by the page (or the partial, when
    partials are treated as components). Raises ``MarkupError`` if the text
    cannot be parsed.
    """
    tree = parse(escape_razor(text))
    kind = classify(tree)

    rewrite_forms(tree)
    rewrite_checkboxes(tree)
    components = export_definitions(tree, config)

    result = DocumentResult(
        source=relative_path,
        kind=kind,
        output_path=output_path(relative_path, kind, config),
        components=components,
        artifacts=[component.to_artifact(config) for component in components],
    )
    logger.info("Found %s, generating %s", relative_path, result.output_path)

    body = page_body(tree)
    if kind is DocumentKind.PAGE:
        result.route = derive_route(relative_path)
        content = render_page(body, result.route, config.layout)
        result.artifacts.append(OutputArtifact(path=result.output_path, content=content))
    elif config.treat_partials_as_components:
        result.artifacts.append(OutputArtifact(path=result.output_path, content=render_partial(body)))
    else:
        logger.debug("Skipping partial %s", relative_path)
    return result
