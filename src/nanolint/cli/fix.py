"""nanolint fix command - apply eslint fixes to a file."""

import asyncio
import sys
from pathlib import Path

import click

from nanolint.cli.utils import load_cli_config
from nanolint.lint.host import FileDocument
from nanolint.lint.ops import LintOps


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--check", is_flag=True, help="Report whether fixes exist without writing")
@click.option(
    "--workspace",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding .nanolint/config.yaml (default: current directory)",
)
def fix_command(file: Path, check: bool, workspace: Path | None) -> None:
    """Apply eslint's fixes to FILE.

    With --check nothing is written and the exit code is 1 if FILE would change.
    """
    settings = load_cli_config(workspace).linter
    document = FileDocument(file)
    changed = asyncio.run(LintOps(lambda: settings).fix(document))

    if not changed:
        click.echo(f"{document.path}: nothing to fix")
        return

    if check:
        click.echo(f"{document.path}: would be fixed")
        sys.exit(1)

    document.save()
    click.echo(f"{document.path}: fixed")
