"""Helper commands for kmatools.

Copyright © 2026 Pixelgen Technologies AB.
"""
from typing import Any

import click

from kmatools.formats import FORMATS
from kmatools.utils import click_echo


def list_formats(ctx: click.Context, param: Any, value: Any) -> None:
    """Print the supported KMA formats and exit.

    :param ctx: The click context
    :param param: The click parameter
    :param value: The click value
    """
    if not value or ctx.resilient_parsing:
        return

    for kma_format in FORMATS.values():
        click_echo(f"{kma_format.name}\t{kma_format.description}")

    ctx.exit()
