"""
Parser for the .mat (depth matrix) files written by KMA

A .mat file has no header. It is a sequence of sections, one per template,
each introduced by a line starting with `#` followed by the template name.
Every other line holds the reference nucleotide and the depths of
A, C, G, T, N and gap at one template position.

Copyright © 2026 Pixelgen Technologies AB.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from kmatools.exception import KMAParseError, MissingSectionHeaderError
from kmatools.fields import (
    TAB,
    UINT32_MAX,
    parse_nucleotide,
    parse_uint,
    strip_split,
)
from kmatools.models import MatrixRow, MatrixSection

logger = logging.getLogger(__name__)

SECTION_MARKER = "#"

# reference nucleotide + 6 depths
MAT_FIELD_COUNT = 7


def decode_row(line: str) -> MatrixRow:
    """
    Decode one depth line of a .mat file.

    :param line: the trimmed line
    :returns: the decoded row
    """
    fields = strip_split(line, MAT_FIELD_COUNT, TAB)
    reference = parse_nucleotide(fields[0])
    depths = tuple(parse_uint(f, max_value=UINT32_MAX) for f in fields[1:])
    return MatrixRow(reference=reference, depths=depths)


def parse_mat(stream: Iterable[str], label: str) -> List[MatrixSection]:
    """
    Parse a .mat file.

    Sections without any rows, i.e. a section marker directly followed by
    another marker or by the end of the file, are dropped.

    :param stream: the lines of the file, e.g. an open text file
    :param label: a label for the input (usually the path), used in errors
    :returns: the non-empty sections in file order
    :raises MissingSectionHeaderError: if a depth line precedes all markers
    :raises KMAParseError: if a depth line is malformed
    """
    sections: List[MatrixSection] = []
    name: Optional[str] = None
    rows: List[MatrixRow] = []

    for line_number, raw_line in enumerate(stream, start=1):
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith(SECTION_MARKER):
            if rows:
                sections.append(MatrixSection(name=name, rows=tuple(rows)))
            name = line[len(SECTION_MARKER) :]
            rows = []
            continue

        if name is None:
            raise MissingSectionHeaderError(label, line_number)

        try:
            rows.append(decode_row(line))
        except KMAParseError as e:
            e.located(label, line_number)
            raise

    if rows:
        sections.append(MatrixSection(name=name, rows=tuple(rows)))

    logger.debug("Parsed %d matrix sections from %s", len(sections), label)
    return sections
