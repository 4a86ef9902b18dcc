"""Parse Pinegrow HTML into a mutable tree and serialize it back for Razor output."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from bs4 import BeautifulSoup, HTMLParserTreeBuilder, ParserRejectedMarkup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

_XML_PROLOG = '<?xml version="1.0" encoding="utf-8"?>'
_WRAPPER_OPEN = "<span>"
_WRAPPER_CLOSE = "</span>"

_START_TAG = re.compile(r"<([a-zA-Z][^\t\n\r\f />\x00]*)")
_ATTRIBUTE = re.compile(r"""[\s/]*([^\s/>"'=][^\s/=>]*)(?:\s*=+\s*(?:'[^']*'|"[^"]*"|[^\s>]*))?""")
_NEWLINE = re.compile("\n")
_PRESERVE_WHITESPACE = HTMLParserTreeBuilder.DEFAULT_PRESERVE_WHITESPACE_TAGS | {BeautifulSoup.ROOT_TAG_NAME}


class MarkupError(Exception):
    """Raised when a document cannot be turned into a tree."""


class SourceOrderFormatter(HTMLFormatter):
    """Minimal-entity HTML output with attributes in the order they were written."""

    def attributes(self, tag: Tag) -> Iterable[tuple[str, object]]:
        return list(tag.attrs.items()) if tag.attrs else []


FORMATTER = SourceOrderFormatter(entity_substitution=EntitySubstitution.substitute_xml)


def escape_razor(text: str) -> str:
    """Escape ``@`` so Razor does not treat literal at-signs as code transitions."""
    return text.replace("@", "@@")


def _tree_builder() -> HTMLParserTreeBuilder:
    # Whitespace-only text under the document root is kept verbatim.
    return HTMLParserTreeBuilder(multi_valued_attributes=None, preserve_whitespace_tags=_PRESERVE_WHITESPACE)


def _restore_case(tree: BeautifulSoup, text: str) -> None:
    """Give tags and attributes back the spelling they have in ``text``.

    ``html.parser`` lowercases every name, which breaks SVG (``viewBox``,
    ``linearGradient``). Each tag's source position locates its start tag.
    """
    line_starts = [0] + [match.end() for match in _NEWLINE.finditer(text)]
    for tag in tree.find_all(True):
        if tag.sourceline is None or tag.sourcepos is None:
            continue
        start = _START_TAG.match(text, line_starts[tag.sourceline - 1] + tag.sourcepos)
        if start is None or start.group(1).lower() != tag.name:
            continue

        spelled: dict[str, str] = {}
        position = start.end()
        while True:
            attribute = _ATTRIBUTE.match(text, position)
            if attribute is None:
                break
            spelled.setdefault(attribute.group(1).lower(), attribute.group(1))
            position = attribute.end()

        tag.name = start.group(1)
        tag.attrs = {spelled.get(name, name): value for name, value in tag.attrs.items()}


def parse(text: str) -> BeautifulSoup:
    """Parse a full page or a bare fragment.

    Attributes are kept single-valued so ``class`` round-trips as written.
    Whitespace between elements and the source spelling of names are kept.
    """
    try:
        tree = BeautifulSoup(text, builder=_tree_builder())
    except ParserRejectedMarkup as exc:
        raise MarkupError(str(exc)) from exc
    _restore_case(tree, text)
    return tree


def named(name: str) -> Callable[[Tag], bool]:
    """Tag filter for ``find``/``find_all`` that ignores how the source cased ``name``."""
    lowered = name.lower()
    return lambda tag: tag.name.lower() == lowered


def strip_artifacts(text: str) -> str:
    """Remove an XML prolog and the inline wrapper it may introduce.

    The parser never produces a prolog itself; this only matters when
    previously generated output is fed back in.
    """
    stripped = text.strip()
    if not stripped.startswith(_XML_PROLOG):
        return text
    stripped = stripped[len(_XML_PROLOG) :]
    if stripped.startswith(_WRAPPER_OPEN) and stripped.endswith(_WRAPPER_CLOSE):
        stripped = stripped[len(_WRAPPER_OPEN) : -len(_WRAPPER_CLOSE)]
    return stripped


def normalize(text: str) -> str:
    """Trim blank edges and remove the indentation shared by all non-blank lines."""
    lines = text.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    indent = min((len(line) - len(line.lstrip()) for line in lines if line.strip()), default=0)
    return "\n".join(line[indent:].rstrip() if len(line) >= indent else line.rstrip() for line in lines)


def to_markup(node: Tag) -> str:
    """Outer markup of ``node`` exactly as the tree holds it, attributes in source order."""
    return node.decode(formatter=FORMATTER)


def serialize(node: Tag, indent: str = "") -> str:
    """Return the normalized outer markup of a node (the whole document for a soup).

    ``indent`` is the whitespace the node started its line with in the source,
    so the first line dedents together with the rest.
    """
    return normalize(indent + strip_artifacts(to_markup(node)))


def serialize_contents(node: Tag) -> str:
    """Return the normalized inner markup of a node."""
    return normalize(strip_artifacts(node.decode_contents(formatter=FORMATTER)))


def element_children(node: Tag) -> list[Tag]:
    """Snapshot of the element children of ``node``, safe to iterate while mutating."""
    return [child for child in node.contents if isinstance(child, Tag)]
