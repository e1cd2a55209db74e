"""
Parser for the .res (result) files written by KMA

Copyright © 2026 Pixelgen Technologies AB.
"""
from __future__ import annotations

from typing import Iterable, List

from kmatools.fields import parse_float, parse_fraction, parse_uint
from kmatools.models import ResRecord
from kmatools.tabular import FieldLayout, parse_table, text_field

RES_COLUMNS = (
    "#Template",
    "Score",
    "Expected",
    "Template_length",
    "Template_Identity",
    "Template_Coverage",
    "Query_Identity",
    "Query_Coverage",
    "Depth",
    "q_value",
    "p_value",
)

RES_HEADER = "\t".join(RES_COLUMNS)

RES_LAYOUT: FieldLayout = (
    text_field,  # template
    parse_uint,  # score
    parse_uint,  # expected
    parse_uint,  # tlen
    parse_fraction,  # tid
    parse_fraction,  # tcov
    parse_fraction,  # qid
    parse_fraction,  # qcov
    parse_float,  # depth
    parse_float,  # qval
    parse_float,  # pval
)


def parse_res(stream: Iterable[str], label: str) -> List[ResRecord]:
    """
    Parse a .res file.

    Coverages and identities are returned as fractions.

    :param stream: the lines of the file, e.g. an open text file
    :param label: a label for the input (usually the path), used in errors
    :returns: one :class:`ResRecord` per data line, in file order
    :raises KMAParseError: if the file is malformed
    """
    return parse_table(stream, label, RES_HEADER, RES_LAYOUT, ResRecord)
