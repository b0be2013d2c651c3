"""classvariance CLI entry point: Click group with subcommands."""

import logging

import click

from classvariance import __version__


@click.group()
@click.version_option(version=__version__, prog_name="classvariance")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """classvariance - resolve CSS class names from variant configs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from classvariance.cli.resolve import resolve  # noqa: E402
from classvariance.cli.combinations import combinations  # noqa: E402
from classvariance.cli.validate import validate  # noqa: E402

cli.add_command(resolve)
cli.add_command(combinations)
cli.add_command(validate)
