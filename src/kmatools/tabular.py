"""
Decoding of the tab separated tables written by KMA (.spa and .res)

A table starts with a fixed header line followed by one record per line.
Blank lines are skipped. Line numbers reported in errors refer to the
position in the input, counting from 1 and including the header and any
blank lines.

Copyright © 2026 Pixelgen Technologies AB.
"""
from __future__ import annotations

import logging
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    Sequence,
    Tuple,
    Type,
    TypeVar,
)

from kmatools.exception import (
    KMAParseError,
    MalformedHeaderError,
    MissingHeaderError,
)
from kmatools.fields import TAB, strip_split
from kmatools.models import TabularRecord

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType", bound=TabularRecord)

# one decoder per column, in column order
FieldLayout = Sequence[Callable[[str], Any]]


def text_field(field: str) -> str:
    """Return a text column as written."""
    return field


def validate_header(
    lines: Iterator[Tuple[int, str]], header: str, label: str
) -> None:
    """
    Consume the first line of `lines` and check that it is the expected header.

    :param lines: an iterator of (line number, line) pairs
    :param header: the expected header, columns joined by tabs
    :param label: the label of the input, used in error messages
    :raises MissingHeaderError: if `lines` is exhausted
    :raises MalformedHeaderError: if the first line does not match `header`
    """
    first = next(lines, None)
    if first is None:
        raise MissingHeaderError(label)

    line = first[1].strip()
    if line != header:
        raise MalformedHeaderError(line, label)


def decode_record(
    line: str, layout: FieldLayout, record_type: Type[RecordType]
) -> RecordType:
    """
    Decode one data line into a record.

    :param line: the line, without its terminator
    :param layout: the decoder of each column
    :param record_type: the record class to build
    :returns: the decoded record
    """
    fields = strip_split(line, len(layout), TAB)
    return record_type.from_values(
        decode(field) for decode, field in zip(layout, fields)
    )


def parse_table(
    stream: Iterable[str],
    label: str,
    header: str,
    layout: FieldLayout,
    record_type: Type[RecordType],
) -> List[RecordType]:
    """
    Parse a complete table from `stream`.

    :param stream: the lines of the input
    :param label: the label of the input, used in error messages only
    :param header: the expected header line
    :param layout: the decoder of each column
    :param record_type: the record class to build
    :returns: the records in input order
    :raises KMAParseError: on the first problem found in the input
    """
    lines = enumerate(stream, start=1)
    validate_header(lines, header, label)

    records: List[RecordType] = []
    for line_number, line in lines:
        if not line.strip():
            continue
        try:
            records.append(decode_record(line.rstrip("\r\n"), layout, record_type))
        except KMAParseError as e:
            e.located(label, line_number)
            raise

    logger.debug(
        "Parsed %d %s records from %s", len(records), record_type.__name__, label
    )
    return records
