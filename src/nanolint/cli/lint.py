"""nanolint lint command - print eslint diagnostics for a file."""

import asyncio
import json
import sys
from pathlib import Path

import click

from nanolint.cli.utils import failure_message, format_diagnostic, load_cli_config
from nanolint.lint.host import FileDocument
from nanolint.lint.ops import LintOps


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--workspace",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding .nanolint/config.yaml (default: current directory)",
)
def lint_command(file: Path, as_json: bool, workspace: Path | None) -> None:
    """Lint FILE with eslint using its nearest eslint config.

    Exits 0 when there are no errors, 1 when eslint reported errors,
    and 2 when eslint could not be run.
    """
    settings = load_cli_config(workspace).linter
    document = FileDocument(file)
    outcome = asyncio.run(LintOps(lambda: settings).diagnose(document))

    if as_json:
        click.echo(
            json.dumps(
                {
                    "path": str(document.path),
                    "status": outcome.status,
                    "config": str(outcome.config_path) if outcome.config_path else None,
                    "error": outcome.error,
                    "diagnostics": [d.to_dict() for d in outcome.diagnostics],
                }
            )
        )
    elif outcome.status == "failed":
        click.echo(failure_message(outcome.error), err=True)
    elif outcome.config_path is None:
        click.echo(f"No eslint config found for {document.path}", err=True)
    else:
        for diagnostic in outcome.diagnostics:
            click.echo(format_diagnostic(document.path, diagnostic))

    if outcome.status == "failed":
        sys.exit(2)
    if outcome.has_errors:
        sys.exit(1)
