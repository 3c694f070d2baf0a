"""nanolint CLI - nanolint command."""

import click

from nanolint import __version__
from nanolint.cli.fix import fix_command
from nanolint.cli.init import init_command
from nanolint.cli.lint import lint_command
from nanolint.cli.locate import locate_command
from nanolint.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="nanolint")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """nanolint - eslint diagnostics and fixes for a single file."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    # defaults until a command loads the workspace logging section
    configure_logging(verbose=verbose)


cli.add_command(lint_command, name="lint")
cli.add_command(fix_command, name="fix")
cli.add_command(locate_command, name="locate")
cli.add_command(init_command, name="init")


if __name__ == "__main__":
    cli()
