"""Replace native HTML idioms with their Blazor component equivalents."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from pinegrow_razor.core.markup import named

FORM_COMPONENT = "EditForm"
CHECKBOX_COMPONENT = "InputCheckbox"


def _replace_element(tree: BeautifulSoup, element: Tag, name: str, attrs: dict[str, str]) -> Tag:
    replacement = tree.new_tag(name, attrs=attrs)
    for child in list(element.contents):
        replacement.append(child.extract())
    element.replace_with(replacement)
    return replacement


def _is_type(name: str) -> bool:
    return name.lower() == "type"


def _is_checkbox(tag: Tag) -> bool:
    if tag.name.lower() != "input":
        return False
    return any(_is_type(name) and str(value).strip().lower() == "checkbox" for name, value in tag.attrs.items())


def rewrite_forms(tree: BeautifulSoup) -> int:
    """Turn every ``<form>`` into an ``<EditForm>`` with the same attributes and children."""
    forms = [form for form in tree.find_all(named("form")) if form.parent is not None]
    for form in forms:
        _replace_element(tree, form, FORM_COMPONENT, dict(form.attrs))
    return len(forms)


def rewrite_checkboxes(tree: BeautifulSoup) -> int:
    """Turn every checkbox ``<input>`` into an ``<InputCheckbox>``, dropping only ``type``."""
    checkboxes = [tag for tag in tree.find_all(_is_checkbox) if tag.parent is not None]
    for checkbox in checkboxes:
        attrs = {name: value for name, value in checkbox.attrs.items() if not _is_type(name)}
        _replace_element(tree, checkbox, CHECKBOX_COMPONENT, attrs)
    return len(checkboxes)
