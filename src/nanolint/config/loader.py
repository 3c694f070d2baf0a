"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (NANOLINT__SECTION__KEY)
3. Workspace user config (.nanolint/config.yaml) - flat, user-facing fields
4. Global config (~/.config/nanolint/config.yaml) - full section layout
5. Built-in defaults (lowest priority)

Configuration is loaded once per lint request rather than cached, so edits
to either YAML file apply to the next request.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from nanolint.config.models import LinterSettings, LoggingConfig, NanoLintConfig
from nanolint.config.user_config import load_user_config
from nanolint.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/nanolint/config.yaml").expanduser()
USER_CONFIG_RELPATH = Path(".nanolint") / "config.yaml"

_REQUIRED_LINTER_FIELDS = ("eslint_path", "shell_path")


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class with instance-based YAML source."""

    class NanoLintSettings(BaseSettings):
        """Root config. Env vars: NANOLINT__LOGGING__LEVEL, NANOLINT__LINTER__ESLINT_PATH, etc."""

        model_config = SettingsConfigDict(
            env_prefix="NANOLINT__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        linter: LinterSettings = LinterSettings()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml files
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return NanoLintSettings


def load_config(
    workspace_root: Path | None = None,
    *,
    require_linter: bool = True,
    **kwargs: Any,
) -> NanoLintConfig:
    """Load config: defaults < global yaml < user config < env vars < kwargs.

    Args:
        workspace_root: Directory holding .nanolint/config.yaml.
                        Defaults to current working directory.
        require_linter: Reject configs without eslint_path and shell_path.
        **kwargs: Override values (highest precedence), keyed by section.

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On invalid YAML syntax, validation errors, or when
            eslint_path / shell_path are not configured anywhere.
    """
    workspace_root = workspace_root or Path.cwd()

    user_config = load_user_config(workspace_root / USER_CONFIG_RELPATH)
    yaml_config = _deep_merge(_load_yaml(GLOBAL_CONFIG_PATH), user_config.to_sections())

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e

    config = NanoLintConfig(logging=settings.logging, linter=settings.linter)  # type: ignore[attr-defined]
    for name in _REQUIRED_LINTER_FIELDS if require_linter else ():
        if not getattr(config.linter, name):
            raise ConfigError.missing_required(f"linter.{name}")
    return config


def load_settings(workspace_root: Path | None = None) -> LinterSettings:
    """Load just the linter section; the usual per-request settings loader."""
    return load_config(workspace_root).linter
