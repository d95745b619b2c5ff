"""Configuration loading with pydantic-settings.

Sources, highest precedence first:

1. keyword arguments to ``load_config``
2. environment variables, ``DOCSWEEP__<SECTION>__<KEY>``
3. project file, ``<project_root>/.docsweep/config.yaml``
4. user file, ``~/.config/docsweep/config.yaml``
5. model defaults
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from docsweep.config.models import DocSweepConfig, ExtractionConfig, LoggingConfig
from docsweep.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/docsweep/config.yaml").expanduser()
PROJECT_CONFIG_DIR = ".docsweep"
CONFIG_FILE_NAME = "config.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    """Read one YAML layer; a missing file is an empty layer."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, recursing into nested sections."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _yaml_layers(project_root: Path) -> dict[str, Any]:
    user_layer = _load_yaml(GLOBAL_CONFIG_PATH)
    project_layer = _load_yaml(project_root / PROJECT_CONFIG_DIR / CONFIG_FILE_NAME)
    return _deep_merge(user_layer, project_layer)


class _YamlSource(PydanticBaseSettingsSource):
    """Serves the already merged YAML layers to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        value = self._data.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return {key: value for key, value in self._data.items() if value is not None}


def _make_settings_class(yaml_data: dict[str, Any]) -> type[BaseSettings]:
    """Settings class bound to one set of YAML layers."""

    class DocSweepSettings(BaseSettings):
        """Root settings; nested env keys use ``__`` (``DOCSWEEP__LOGGING__LEVEL``)."""

        model_config = SettingsConfigDict(
            env_prefix="DOCSWEEP__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        extraction: ExtractionConfig = ExtractionConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_data))

    return DocSweepSettings


DocSweepSettings = _make_settings_class({})


def load_config(project_root: Path | None = None, **kwargs: Any) -> DocSweepConfig:
    """Resolve configuration from every source.

    Args:
        project_root: Directory holding ``.docsweep/``. Defaults to the
            current working directory.
        **kwargs: Section overrides, e.g. ``logging=LoggingConfig(...)``.

    Raises:
        ConfigError: A YAML file is malformed or a value fails validation.
    """
    layers = _yaml_layers(project_root or Path.cwd())
    try:
        settings = _make_settings_class(layers)(**kwargs)
        return DocSweepConfig.model_validate(settings.model_dump())
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ConfigError.invalid_value(field, first.get("input"), first["msg"]) from e
