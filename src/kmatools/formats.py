"""
Registry of the KMA file formats known to kmatools

Copyright © 2026 Pixelgen Technologies AB.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from kmatools.mat import parse_mat
from kmatools.models import ResRecord, SpaRecord, TabularRecord
from kmatools.res import parse_res
from kmatools.spa import parse_spa
from kmatools.types import PathType
from kmatools.utils import get_extension

COMPRESSION_SUFFIXES = ("gz", "bz2", "xz", "zst")


@dataclass(frozen=True)
class KMAFormat:
    """
    A KMA output format.

    :ivar name: the format name, also the file suffix KMA uses
    :ivar parser: the function parsing a stream of this format
    :ivar record_type: the record class of tabular formats, None for .mat
    :ivar description: a one line description
    """

    name: str
    parser: Callable[[Iterable[str], str], List]
    record_type: Optional[type[TabularRecord]]
    description: str

    @property
    def suffix(self) -> str:
        return f".{self.name}"


FORMATS: Dict[str, KMAFormat] = {
    f.name: f
    for f in (
        KMAFormat("spa", parse_spa, SpaRecord, "template summary table"),
        KMAFormat("res", parse_res, ResRecord, "template result table"),
        KMAFormat("mat", parse_mat, None, "per position depth matrix"),
    )
}


def get_format(name: str) -> KMAFormat:
    """
    Get a format by name.

    :param name: one of the registered format names
    :raises ValueError: if the format is unknown
    """
    try:
        return FORMATS[name]
    except KeyError:
        raise ValueError(
            f"Unknown format {name!r}, expected one of {', '.join(FORMATS)}"
        ) from None


def detect_format(path: PathType) -> KMAFormat:
    """
    Pick the format of a file from its suffix.

    A trailing compression suffix is ignored, so `sample.mat.gz` is
    detected as a .mat file.

    :param path: the file path
    :returns: the matching format
    :raises ValueError: if the suffix is not a known format
    """
    extension = get_extension(path, len_ext=2)
    parts = extension.split(".")
    if len(parts) > 1 and parts[-1] in COMPRESSION_SUFFIXES:
        parts = parts[:-1]
    name = parts[-1]
    if name not in FORMATS:
        raise ValueError(f"Cannot detect the KMA format of {path}")
    return FORMATS[name]
