"""
Common functions and utilities for kmatools

Copyright © 2026 Pixelgen Technologies AB.
"""
from __future__ import annotations

import logging
import os
import textwrap
import time
from functools import wraps
from pathlib import PurePath
from typing import List, Optional

import click

from kmatools import __version__
from kmatools.types import PathType

logger = logging.getLogger(__name__)


def click_echo(msg: str, multiline: bool = False):
    """
    Helper function that print a line to the console
    with long-line wrapping.

    :param msg: the message to print
    :param multiline: True to use text wrapping or False otherwise (default)
    """
    if multiline:
        click.echo(textwrap.fill(textwrap.dedent(msg), width=100))
    else:
        click.echo(msg)


def get_extension(filename: PathType, len_ext: int = 2) -> str:
    """
    Utility function to extract file extensions.

    :param filename: the file name
    :param len_ext: the number of suffixes to keep
    :returns: the file extension (str)
    """
    return "".join(PurePath(filename).suffixes[-len_ext:]).lstrip(".")


def get_env_int(key: str, default: int) -> int:
    """
    Read an integer setting from the environment.

    :param key: the name of the environment variable
    :param default: the value to use when the variable is unset or empty
    :returns: the setting
    :raises ValueError: if the variable is set but is not an integer
    """
    value = os.getenv(key, default="").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {value!r}") from e


def log_step_start(
    step_name: str,
    input_files: Optional[List[str]] = None,
    output: Optional[str] = None,
    **kwargs,
) -> None:
    """
    Utility function to add information about the start of a
    kmatools command to the logs

    :param step_name: name of the step that is starting
    :param input_files: optional collection of input file paths
    :param output: optional path to output
    :param kwargs: any additional parameters that you wish to log
    :returns: None
    """
    logger.info("Start kmatools %s %s", step_name, __version__)

    if input_files is not None:
        logger.info("Input file(s) %s", ",".join(input_files))

    if output is not None:
        logger.info("Output %s", output)

    if kwargs:
        params = [f"{key.replace('_', '-')}={value}" for key, value in kwargs.items()]
        logger.info("Parameters:%s", ",".join(params))


def timer(func):
    """
    Function decorator used to time the different commands
    """

    @wraps(func)
    def wrapper(*args, **kwds):
        start_time = time.perf_counter()
        res = func(*args, **kwds)
        run_time = time.perf_counter() - start_time
        logger.info("Finished kmatools %s in %.2fs", func.__name__, run_time)
        return res

    return wrapper
