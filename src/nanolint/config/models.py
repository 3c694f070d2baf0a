"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (NANOLINT__SECTION__KEY)
3. Workspace user config (.nanolint/config.yaml)
4. Global YAML (~/.config/nanolint/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    NANOLINT__<SECTION>__<KEY>=<VALUE>

Examples:
    NANOLINT__LOGGING__LEVEL=DEBUG
    NANOLINT__LINTER__ESLINT_PATH=/opt/homebrew/bin/eslint
    NANOLINT__LINTER__FIX_ON_SAVE=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        NANOLINT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every eslint command and its raw result.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class LinterSettings(BaseModel):
    """How eslint is located and invoked.

    ``eslint_path`` and ``shell_path`` have no defaults; load_config()
    rejects a configuration that leaves either unset.

    Env vars:
        NANOLINT__LINTER__ESLINT_PATH: eslint executable
        NANOLINT__LINTER__SHELL_PATH: shell used to run eslint
        NANOLINT__LINTER__CONFIG_NAMES: JSON list of extra config filenames
        NANOLINT__LINTER__FIX_ON_SAVE: Apply eslint fixes before saving
    """

    eslint_path: str | None = Field(
        default=None,
        description="Path to the eslint executable.",
    )
    shell_path: str | None = Field(
        default=None,
        description="Shell that runs eslint (so PATH and node version managers apply). "
        "When unset, eslint is executed directly.",
    )
    config_names: list[str] = Field(
        default_factory=list,
        description="Extra config filenames, probed before the built-in eslint.config.* names.",
    )
    fix_on_save: bool = Field(
        default=False,
        description="Run eslint --fix-dry-run before each save and apply the result.",
    )
    timeout_sec: float = Field(
        default=30.0,
        description="Kill eslint if it has not exited after this many seconds.",
    )
    save_delay_sec: float = Field(
        default=0.1,
        description="Delay before re-saving a document that was rewritten during save.",
    )
    max_ascent: int = Field(
        default=100,
        description="Maximum number of parent directories searched for a config file.",
    )

    @field_validator("config_names")
    @classmethod
    def validate_config_names(cls, v: list[str]) -> list[str]:
        for name in v:
            if not name or "/" in name or "\\" in name:
                raise ValueError(f"Config name must be a bare filename: {name!r}")
        return v

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v

    @field_validator("save_delay_sec")
    @classmethod
    def validate_save_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"Save delay must not be negative, got {v}")
        return v

    @field_validator("max_ascent")
    @classmethod
    def validate_max_ascent(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Max ascent must not be negative, got {v}")
        return v


class NanoLintConfig(BaseModel):
    """Root configuration for nanolint.

    All settings can be configured via:
    1. Environment variables: NANOLINT__SECTION__KEY
    2. YAML config files (workspace or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    linter: LinterSettings = Field(default_factory=LinterSettings)
