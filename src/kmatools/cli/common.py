"""
Console script for kmatools (common functions)

Copyright © 2026 Pixelgen Technologies AB.
"""

import functools
import logging
from typing import List, Optional

import click

from kmatools.exception import KMAParseError
from kmatools.formats import FORMATS, KMAFormat, detect_format, get_format
from kmatools.io import read

logger = logging.getLogger("kmatools.cli")


def format_option(func):
    """Decorate a click command and add the --format option."""

    @click.option(
        "--format",
        "fmt",
        required=False,
        default=None,
        type=click.Choice(list(FORMATS.keys())),
        help="The KMA format of the input (detected from the file suffix if omitted)",
    )
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper


def output_option(func):
    """Wrap a Click entrypoint to add the --output option."""

    @click.option(
        "--output",
        required=True,
        type=click.Path(exists=False, dir_okay=False),
        help="The path of the table to write (tab separated if it ends in .tsv)",
    )
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper


def resolve_format(input_file: str, fmt: Optional[str]) -> KMAFormat:
    """
    Return the format given on the command line or detect it from the input.

    :param input_file: the input path
    :param fmt: the value of the --format option
    :raises click.BadParameter: if the format cannot be detected
    """
    if fmt is not None:
        return get_format(fmt)
    try:
        return detect_format(input_file)
    except ValueError as e:
        raise click.BadParameter(
            f"{e}, use --format to select one", param_hint="INPUT"
        ) from e


def read_input(input_file: str, kma_format: KMAFormat) -> List:
    """
    Parse an input file, reporting decoding errors as click errors.

    :param input_file: the input path
    :param kma_format: the format of the input
    :raises click.ClickException: if the input cannot be decoded
    """
    try:
        return read(input_file, kma_format.name)
    except KMAParseError as e:
        raise click.ClickException(str(e)) from e
