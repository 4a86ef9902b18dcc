import os

from pydantic import BaseModel

_ENV_PREFIX = "PINEGROW_RAZOR_"
_TRUTHY = {"1", "true", "yes", "on"}


class ConverterConfig(BaseModel):
    component_directory: str = "Components"
    page_directory: str = "Pages"
    treat_partials_as_components: bool = False
    layout: str | None = "EmptyLayout"
    carry_defaults: bool = False


def _env_flag(name: str) -> bool | None:
    value = os.getenv(_ENV_PREFIX + name)
    if value is None:
        return None
    return value.strip().lower() in _TRUTHY


def load_config(**overrides: object) -> ConverterConfig:
    """Build the converter configuration from the environment.

    Keyword overrides whose value is not ``None`` win over environment values.
    """
    values: dict[str, object] = {}
    component_dir = os.getenv(_ENV_PREFIX + "COMPONENT_DIR")
    if component_dir:
        values["component_directory"] = component_dir
    page_dir = os.getenv(_ENV_PREFIX + "PAGE_DIR")
    if page_dir:
        values["page_directory"] = page_dir
    layout = os.getenv(_ENV_PREFIX + "LAYOUT")
    if layout is not None:
        values["layout"] = layout or None
    partials = _env_flag("PARTIALS_AS_COMPONENTS")
    if partials is not None:
        values["treat_partials_as_components"] = partials
    carry_defaults = _env_flag("CARRY_DEFAULTS")
    if carry_defaults is not None:
        values["carry_defaults"] = carry_defaults

    values.update({key: value for key, value in overrides.items() if value is not None})
    return ConverterConfig.model_validate(values)
