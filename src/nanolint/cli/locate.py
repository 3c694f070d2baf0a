"""nanolint locate command - show which eslint config applies."""

import sys
from pathlib import Path

import click

from nanolint.cli.utils import load_cli_config
from nanolint.lint.locator import build_search_spec, locate_with_spec


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--name",
    "names",
    multiple=True,
    help="Extra config filename to try first (repeatable)",
)
@click.option(
    "--workspace",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding .nanolint/config.yaml (default: current directory)",
)
def locate_command(path: Path, names: tuple[str, ...], workspace: Path | None) -> None:
    """Print the eslint config nearest to PATH (a file or directory).

    Exits 1 if no config is found.
    """
    settings = load_cli_config(workspace, require_linter=False).linter
    spec = build_search_spec([*names, *settings.config_names], max_depth=settings.max_ascent)
    start = path if path.is_dir() else path.parent

    config_path = locate_with_spec(start, spec)
    if config_path is None:
        click.echo(f"No eslint config found for {path}", err=True)
        sys.exit(1)
    click.echo(str(config_path))
