"""csschain CLI entry point: Click group with subcommands."""

import sys

import click

from csschain import __version__
from csschain.config import Settings, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="csschain")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """csschain - build CSS selectors and try the object helpers."""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


# Import and register subcommands
from csschain.cli.rectangle import rectangle  # noqa: E402
from csschain.cli.selector import selector  # noqa: E402

cli.add_command(selector)
cli.add_command(rectangle)
