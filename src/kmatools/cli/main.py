"""Main console script for kmatools.

Copyright © 2026 Pixelgen Technologies AB.
"""

import sys

import click

from kmatools import __version__
from kmatools.cli.common import logger
from kmatools.cli.convert import convert
from kmatools.cli.misc import list_formats
from kmatools.cli.summary import summary
from kmatools.logging import LoggingSetup


@click.group(name="kmatools")
@click.version_option(__version__)
@click.option(
    "--verbose",
    type=click.BOOL,
    default=False,
    is_flag=True,
    help="Show extended messages during execution",
)
@click.option(
    "--log-file",
    required=False,
    default=None,
    type=click.Path(exists=False),
    help="The path to the log file (it is created if it does not exist)",
)
@click.option(
    "--list-formats",
    is_flag=True,
    metavar="",
    is_eager=True,
    expose_value=False,
    required=False,
    callback=list_formats,
    help="List supported KMA formats and exit.",
)
@click.pass_context
def main_cli(ctx, verbose: bool, log_file: str):
    """Decode the output files of the KMA aligner."""
    # This registers the logger with it's context manager,
    # so that it is clean-up properly when the command is done.
    ctx.ensure_object(dict)
    ctx.obj["LOGGER"] = ctx.with_resource(LoggingSetup(log_file, verbose=verbose))
    ctx.obj["VERBOSE"] = verbose

    if verbose:
        logger.info("Running in VERBOSE mode")
    return 0


main_cli.add_command(convert)
main_cli.add_command(summary)


if __name__ == "__main__":
    sys.exit(main_cli())  # pragma: no cover
