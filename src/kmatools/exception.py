"""
This module contains all the exception classes raised while
decoding KMA output files

Copyright © 2026 Pixelgen Technologies AB.
"""

from typing import Optional


class KMAParseError(Exception):
    """
    Base class for all errors raised while decoding a KMA file.

    Attributes:
        msg: the error message to output
        label: the label of the input (usually a file path), or None
        line_number: the 1-based line number of the offending line, or None
                     when the error is not tied to a specific line
    """

    def __init__(
        self,
        msg: str,
        label: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.msg = msg
        self.label = label
        self.line_number = line_number
        super().__init__(self._format())

    def _format(self) -> str:
        if self.label is None:
            return self.msg
        if self.line_number is None:
            return f'{self.msg} in file "{self.label}"'
        return f'{self.msg} in file "{self.label}" at line {self.line_number}'

    def located(self, label: str, line_number: Optional[int]) -> "KMAParseError":
        """
        Attach a label and a line number to an error raised without them.

        :param label: the label of the input
        :param line_number: the 1-based line number
        :returns: the same error, updated in place
        """
        self.label = label
        self.line_number = line_number
        self.args = (self._format(),)
        return self


class MissingHeaderError(KMAParseError):
    """The stream was empty where a header line was expected."""

    def __init__(self, label: Optional[str] = None):
        super().__init__("Missing header", label)


class MalformedHeaderError(KMAParseError):
    """
    The header line is present but does not match the expected header.

    Attributes:
        line: the offending header line (trimmed)
    """

    def __init__(self, line: str, label: Optional[str] = None):
        self.line = line
        super().__init__(f"Malformed header {line!r}", label, 1)


class FieldCountError(KMAParseError):
    """
    A line does not split into the exact number of fields required.

    Attributes:
        expected: the required number of fields
        actual: the number of fields found in the line
    """

    def __init__(
        self,
        expected: int,
        actual: int,
        label: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Incorrect number of fields (expected {expected}, found {actual})",
            label,
            line_number,
        )


class NumericParseError(KMAParseError):
    """
    A field could not be parsed as the required numeric type.

    Attributes:
        field: the offending field text
        type_name: the name of the numeric type that was expected
    """

    def __init__(
        self,
        field: str,
        type_name: str,
        label: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.field = field
        self.type_name = type_name
        super().__init__(
            f"Cannot parse {field!r} as {type_name}", label, line_number
        )


class MultiCharacterNucleotideError(KMAParseError):
    """The reference nucleotide field of a matrix row is not one character."""

    def __init__(
        self,
        field: str,
        label: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.field = field
        super().__init__(
            f"Multi-character reference nucleotide {field!r}", label, line_number
        )


class InvalidNucleotideError(KMAParseError):
    """The reference nucleotide of a matrix row is not a nucleotide symbol."""

    def __init__(
        self,
        field: str,
        label: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.field = field
        super().__init__(
            f"Invalid reference nucleotide {field!r}", label, line_number
        )


class MissingSectionHeaderError(KMAParseError):
    """A depth row was found before any section marker."""

    def __init__(
        self, label: Optional[str] = None, line_number: Optional[int] = None
    ):
        super().__init__("Expected section header", label, line_number)
