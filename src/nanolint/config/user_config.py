"""Minimal user-facing configuration.

This module defines only the config fields that users should care about.
Everything else uses opinionated defaults.

User config is stored in .nanolint/config.yaml in the workspace.
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from nanolint.core.errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_LEVEL: LogLevel = "WARNING"


class UserConfig(BaseModel):
    """User-facing configuration options.

    Field names match the editor settings store, so a settings export can
    be pasted into config.yaml as-is.
    """

    eslint_path: str | None = Field(
        default=None,
        description="Path to the eslint executable.",
    )
    shell_path: str | None = Field(
        default=None,
        description="Shell that runs eslint.",
    )
    config_names: list[str] = Field(
        default_factory=list,
        description="Extra config filenames, tried before eslint.config.*.",
    )
    fix_on_save: bool = Field(
        default=False,
        description="Apply eslint fixes when saving.",
    )
    log_level: LogLevel = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Log level. DEBUG is very verbose.",
    )

    def to_sections(self) -> dict[str, Any]:
        """Map the flat user fields onto the internal config sections.

        Unset fields are left out so lower-precedence sources still apply.
        """
        linter: dict[str, Any] = {}
        for key in ("eslint_path", "shell_path", "config_names", "fix_on_save"):
            if key in self.model_fields_set:
                linter[key] = getattr(self, key)
        sections: dict[str, Any] = {"linter": linter}
        if "log_level" in self.model_fields_set:
            sections["logging"] = {"level": self.log_level}
        return sections


def write_user_config(path: Path, config: UserConfig | None = None) -> None:
    """Write user config file with helpful comments.

    Args:
        path: Path to write config.yaml
        config: Config values (uses defaults if None)
    """
    cfg = config or UserConfig()

    lines = [
        "# nanolint configuration",
        "",
    ]

    lines.append("# Path to the eslint executable (required)")
    if cfg.eslint_path:
        lines.append(f"eslint_path: {cfg.eslint_path}")
    else:
        lines.append("# eslint_path: /usr/local/bin/eslint")
    lines.append("")

    lines.append("# Shell that runs eslint, so PATH and node version managers apply (required)")
    if cfg.shell_path:
        lines.append(f"shell_path: {cfg.shell_path}")
    else:
        lines.append("# shell_path: /bin/sh")
    lines.append("")

    lines.append("# Extra config filenames, tried before eslint.config.js and friends")
    if cfg.config_names:
        lines.append("config_names:")
        lines.extend(f"  - {name}" for name in cfg.config_names)
    else:
        lines.append("# config_names:")
        lines.append("#   - .eslintrc.json")
    lines.append("")

    lines.append("# Apply eslint fixes when a document is saved")
    lines.append(f"fix_on_save: {'true' if cfg.fix_on_save else 'false'}")
    lines.append("")

    lines.append("# Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL")
    if cfg.log_level != DEFAULT_LOG_LEVEL:
        lines.append(f"log_level: {cfg.log_level}")
    else:
        lines.append(f"# log_level: {cfg.log_level}")
    lines.append("")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines))


def load_user_config(path: Path) -> UserConfig:
    """Load user config from YAML file.

    Raises:
        ConfigError: On invalid YAML syntax or invalid values.
    """
    if not path.exists():
        return UserConfig()
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "expected a mapping at top level")
    try:
        return UserConfig(**data)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
