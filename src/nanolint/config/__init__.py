"""Config module exports."""

from nanolint.config.loader import load_config, load_settings
from nanolint.config.models import (
    LinterSettings,
    LoggingConfig,
    LogOutputConfig,
    NanoLintConfig,
)

__all__ = [
    "load_config",
    "load_settings",
    "LinterSettings",
    "LoggingConfig",
    "LogOutputConfig",
    "NanoLintConfig",
]
