"""
Parser for the .spa (summary) files written by KMA

Copyright © 2026 Pixelgen Technologies AB.
"""
from __future__ import annotations

from typing import Iterable, List

from kmatools.fields import parse_float, parse_fraction, parse_uint
from kmatools.models import SpaRecord
from kmatools.tabular import FieldLayout, parse_table, text_field

SPA_COLUMNS = (
    "#Template",
    "Num",
    "Score",
    "Expected",
    "Template_length",
    "Query_Coverage",
    "Template_Coverage",
    "Depth",
    "tot_query_Coverage",
    "tot_template_Coverage",
    "tot_depth",
    "q_value",
    "p_value",
)

SPA_HEADER = "\t".join(SPA_COLUMNS)

SPA_LAYOUT: FieldLayout = (
    text_field,  # template
    parse_uint,  # num
    parse_uint,  # score
    parse_uint,  # expected
    parse_uint,  # tlen
    parse_fraction,  # qcov
    parse_fraction,  # tcov
    parse_float,  # depth
    parse_fraction,  # total_qcov
    parse_fraction,  # total_tcov
    parse_float,  # total_depth
    parse_float,  # qval
    parse_float,  # pval
)


def parse_spa(stream: Iterable[str], label: str) -> List[SpaRecord]:
    """
    Parse a .spa file.

    Coverages are returned as fractions, i.e. the percentages in the file
    divided by 100 and rounded to 6 decimals.

    :param stream: the lines of the file, e.g. an open text file
    :param label: a label for the input (usually the path), used in errors
    :returns: one :class:`SpaRecord` per data line, in file order
    :raises KMAParseError: if the file is malformed
    """
    return parse_table(stream, label, SPA_HEADER, SPA_LAYOUT, SpaRecord)
