"""nestcss CLI entry point: Click group with subcommands."""

import logging

import click

from nestcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="nestcss")
@click.option("--verbose", "-v", is_flag=True, help="Log compiler activity to stderr.")
def cli(verbose: bool) -> None:
    """nestcss - compile nested style trees into CSS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from nestcss.cli.compile import compile_cmd  # noqa: E402
from nestcss.cli.validate import validate  # noqa: E402
from nestcss.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(validate)
cli.add_command(inspect)
