"""nanolint init command - write a workspace config file."""

import os
import shutil
from pathlib import Path

import click

from nanolint.config.loader import USER_CONFIG_RELPATH
from nanolint.config.user_config import UserConfig, write_user_config


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--eslint-path", default=None, help="eslint executable (default: found on PATH)")
@click.option("--shell-path", default=None, help="Shell to run eslint with (default: $SHELL)")
@click.option("--fix-on-save", is_flag=True, help="Apply eslint fixes when saving")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init_command(
    path: Path,
    eslint_path: str | None,
    shell_path: str | None,
    fix_on_save: bool,
    force: bool,
) -> None:
    """Create .nanolint/config.yaml in PATH (default: current directory)."""
    config_file = path.resolve() / USER_CONFIG_RELPATH
    if config_file.exists() and not force:
        raise click.ClickException(f"{config_file} already exists. Use --force to overwrite.")

    config = UserConfig(
        eslint_path=eslint_path or shutil.which("eslint"),
        shell_path=shell_path or os.environ.get("SHELL") or "/bin/sh",
        fix_on_save=fix_on_save,
    )
    write_user_config(config_file, config)

    click.echo(f"Wrote {config_file}")
    if not config.eslint_path:
        click.echo("eslint was not found on PATH; set eslint_path before linting.", err=True)
