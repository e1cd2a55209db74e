"""
Console script for kmatools convert

Copyright © 2026 Pixelgen Technologies AB.
"""

import logging
from pathlib import Path

import click

from kmatools.cli.common import (
    format_option,
    output_option,
    read_input,
    resolve_format,
)
from kmatools.frames import records_to_dataframe, sections_to_dataframe
from kmatools.utils import log_step_start, timer

logger = logging.getLogger(__name__)


@click.command(
    "convert",
    short_help="convert a KMA output file to a csv or tsv table",
    options_metavar="<options>",
)
@click.argument(
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    metavar="INPUT",
)
@format_option
@output_option
@timer
def convert(input_file, fmt, output):
    """
    Convert a KMA .spa, .res or .mat file (optionally compressed) to a table
    """
    kma_format = resolve_format(input_file, fmt)
    log_step_start(
        "convert", input_files=[input_file], output=output, format=kma_format.name
    )

    parsed = read_input(input_file, kma_format)
    if kma_format.record_type is None:
        df = sections_to_dataframe(parsed)
    else:
        df = records_to_dataframe(parsed, kma_format.record_type)

    output_path = Path(output)
    output_path.resolve().parent.mkdir(parents=True, exist_ok=True)
    sep = "\t" if ".tsv" in output_path.suffixes else ","
    df.to_csv(output_path, sep=sep, index=False)
    logger.info("Wrote %d rows to %s", len(df), output)
