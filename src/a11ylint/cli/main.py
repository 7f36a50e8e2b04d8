"""a11ylint CLI entry point: Click group with subcommands."""

import logging

import click

from a11ylint import __version__


@click.group()
@click.version_option(version=__version__, prog_name="a11ylint")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """a11ylint - accessibility checks for CSS and SCSS stylesheets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from a11ylint.cli.lint import lint  # noqa: E402
from a11ylint.cli.rules import rules  # noqa: E402

cli.add_command(lint)
cli.add_command(rules)
