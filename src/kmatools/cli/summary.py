"""
Console script for kmatools summary

Copyright © 2026 Pixelgen Technologies AB.
"""

import click

from kmatools.cli.common import format_option, read_input, resolve_format
from kmatools.utils import click_echo


@click.command(
    "summary",
    short_help="print the number of records in a KMA output file",
    options_metavar="<options>",
)
@click.argument(
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    metavar="INPUT",
)
@format_option
def summary(input_file, fmt):
    """
    Print the number of records (.spa, .res) or sections and rows (.mat)
    """
    kma_format = resolve_format(input_file, fmt)
    parsed = read_input(input_file, kma_format)

    click_echo(f"format\t{kma_format.name}")
    if kma_format.record_type is None:
        click_echo(f"sections\t{len(parsed)}")
        click_echo(f"rows\t{sum(len(s.rows) for s in parsed)}")
    else:
        click_echo(f"records\t{len(parsed)}")
