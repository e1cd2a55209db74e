"""
Splitting of delimited lines and decoding of typed fields

The functions in this module know nothing about the file being read.
Errors are raised without a label or a line number, the decoders that
call them attach that information before the error reaches the caller.

Copyright © 2026 Pixelgen Technologies AB.
"""
from __future__ import annotations

import re
from typing import List, Optional

from kmatools.exception import (
    FieldCountError,
    InvalidNucleotideError,
    MultiCharacterNucleotideError,
    NumericParseError,
)

TAB = "\t"

# the largest depth count a matrix row can hold
UINT32_MAX = 2**32 - 1

# IUPAC nucleotide symbols plus the gap symbol, in both cases
NUCLEOTIDE_SYMBOLS = frozenset("ACGTMRWSYKVHDBN-" + "acgtmrwsykvhdbn")

_UINT_PATTERN = re.compile(r"\+?[0-9]+")


def strip_split(line: str, n_fields: int, sep: str = TAB) -> List[str]:
    """
    Split a line on `sep` into exactly `n_fields` fields and trim the
    surrounding whitespace of every field.

    :param line: the line to split
    :param n_fields: the exact number of fields the line must contain
    :param sep: a single character separator
    :returns: the list of trimmed fields
    :raises ValueError: if `sep` is not a single character
    :raises FieldCountError: if the line does not contain exactly `n_fields`
                             fields
    """
    if len(sep) != 1:
        raise ValueError(f"Separator must be a single character, got {sep!r}")

    fields = line.split(sep)
    if len(fields) != n_fields:
        raise FieldCountError(expected=n_fields, actual=len(fields))
    return [f.strip() for f in fields]


def parse_uint(text: str, max_value: Optional[int] = None) -> int:
    """
    Parse a base-10 unsigned integer.

    :param text: the field to parse
    :param max_value: an optional inclusive upper bound
    :returns: the parsed integer
    :raises NumericParseError: if the text is not an unsigned integer or
                               exceeds `max_value`
    """
    if not _UINT_PATTERN.fullmatch(text):
        raise NumericParseError(text, "unsigned integer")
    value = int(text)
    if max_value is not None and value > max_value:
        raise NumericParseError(text, f"unsigned integer <= {max_value}")
    return value


def parse_float(text: str) -> float:
    """
    Parse a base-10 floating point number.

    :param text: the field to parse
    :returns: the parsed value
    :raises NumericParseError: if the text is not a floating point number
    """
    # python accepts digit separators, KMA never writes them
    if "_" in text:
        raise NumericParseError(text, "float")
    try:
        return float(text)
    except ValueError as e:
        raise NumericParseError(text, "float") from e


def parse_fraction(text: str) -> float:
    """
    Parse a percentage and return it as a fraction rounded to 6 decimals.

    :param text: the field to parse, e.g. "57.23"
    :returns: the fraction, e.g. 0.5723
    """
    return round(parse_float(text) / 100, 6)


def parse_nucleotide(text: str) -> str:
    """
    Parse a reference nucleotide, keeping its case.

    :param text: the field to parse
    :returns: the nucleotide symbol
    :raises MultiCharacterNucleotideError: if the field is not one character
    :raises InvalidNucleotideError: if the character is not a nucleotide
    """
    if len(text) != 1:
        raise MultiCharacterNucleotideError(text)
    if text not in NUCLEOTIDE_SYMBOLS:
        raise InvalidNucleotideError(text)
    return text
