"""
Read KMA output files from disk

The parsers in :mod:`kmatools.spa`, :mod:`kmatools.res` and
:mod:`kmatools.mat` work on any stream of lines. The functions here open
a file, decompressing it when needed, and hand it to the right parser.

.. code-block:: python

    from kmatools.io import read_res

    records = read_res("sample.res")

Copyright © 2026 Pixelgen Technologies AB.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Union

from xopen import xopen

from kmatools.formats import KMAFormat, detect_format, get_format
from kmatools.models import MatrixSection, ResRecord, SpaRecord
from kmatools.types import PathType
from kmatools.utils import get_env_int

logger = logging.getLogger(__name__)

THREADS_ENV_VAR = "KMATOOLS_THREADS"


def _read(path: PathType, kma_format: KMAFormat) -> List:
    threads = get_env_int(THREADS_ENV_VAR, default=0)
    logger.debug("Reading %s as %s", path, kma_format.name)
    with xopen(path, "rt", threads=threads) as fh:
        return kma_format.parser(fh, str(path))


def read_spa(path: PathType) -> List[SpaRecord]:
    """
    Read a .spa file, optionally compressed.

    :param path: the file to read
    :returns: the records of the file
    """
    return _read(path, get_format("spa"))


def read_res(path: PathType) -> List[ResRecord]:
    """
    Read a .res file, optionally compressed.

    :param path: the file to read
    :returns: the records of the file
    """
    return _read(path, get_format("res"))


def read_mat(path: PathType) -> List[MatrixSection]:
    """
    Read a .mat file, optionally compressed.

    :param path: the file to read
    :returns: the sections of the file
    """
    return _read(path, get_format("mat"))


def read(
    path: PathType, fmt: Optional[str] = None
) -> Union[List[SpaRecord], List[ResRecord], List[MatrixSection]]:
    """
    Read any KMA output file.

    :param path: the file to read
    :param fmt: the format name, detected from the file suffix if None
    :returns: the records or sections of the file
    :raises ValueError: if the format is unknown or cannot be detected
    """
    kma_format = get_format(fmt) if fmt is not None else detect_format(path)
    return _read(path, kma_format)
