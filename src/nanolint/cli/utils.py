"""CLI utilities."""

from pathlib import Path

import click

from nanolint.config.loader import load_config
from nanolint.config.models import NanoLintConfig
from nanolint.core.errors import ConfigError
from nanolint.core.logging import configure_logging, get_log_file_path
from nanolint.lint.models import Diagnostic


def _verbose_requested() -> bool:
    ctx = click.get_current_context(silent=True)
    return bool(ctx is not None and ctx.obj and ctx.obj.get("verbose"))


def load_cli_config(workspace: Path | None, *, require_linter: bool = True) -> NanoLintConfig:
    """Load config for a CLI command and apply its logging section.

    ``nanolint -v`` still forces DEBUG on top of the configured level.

    Raises:
        click.ClickException: If the configuration is invalid or incomplete
    """
    try:
        config = load_config(workspace, require_linter=require_linter)
    except ConfigError as e:
        hint = ""
        if e.error_name == "CONFIG_MISSING_REQUIRED":
            hint = "\nRun 'nanolint init' or set NANOLINT__LINTER__ESLINT_PATH / SHELL_PATH."
        raise click.ClickException(f"{e.message}{hint}") from e
    configure_logging(config.logging, verbose=_verbose_requested())
    return config


def format_diagnostic(path: Path, diagnostic: Diagnostic) -> str:
    """Render as ``path:line:column: severity: message [rule]``."""
    text = f"{path}:{diagnostic.line}:{diagnostic.column}: {diagnostic.severity.value}: "
    text += diagnostic.message
    if diagnostic.code:
        text += f" [{diagnostic.code}]"
    return text


def failure_message(reason: str | None) -> str:
    message = f"Lint failed: {reason or 'unknown error'}"
    if log_path := get_log_file_path():
        message += f"\nSee {log_path} for details."
    return message
