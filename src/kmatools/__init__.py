"""Top-level package for kmatools.

Copyright © 2026 Pixelgen Technologies AB.
"""

from importlib import metadata

__version__ = "0.0.0"

try:
    __version__ = metadata.version("kmatools")
except metadata.PackageNotFoundError:
    pass


# Adding imports here as shortcuts to be able to import like
# import kmatools
# kmatools.read_res("<file path>")
# and similar
from kmatools.exception import (  # noqa: E402
    FieldCountError,
    InvalidNucleotideError,
    KMAParseError,
    MalformedHeaderError,
    MissingHeaderError,
    MissingSectionHeaderError,
    MultiCharacterNucleotideError,
    NumericParseError,
)
from kmatools.io import read, read_mat, read_res, read_spa  # noqa: E402
from kmatools.mat import parse_mat  # noqa: E402
from kmatools.models import (  # noqa: E402
    MatrixRow,
    MatrixSection,
    ResRecord,
    SpaRecord,
)
from kmatools.res import parse_res  # noqa: E402
from kmatools.spa import parse_spa  # noqa: E402

__all__ = [
    "parse_spa",
    "parse_res",
    "parse_mat",
    "read",
    "read_spa",
    "read_res",
    "read_mat",
    "SpaRecord",
    "ResRecord",
    "MatrixRow",
    "MatrixSection",
    "KMAParseError",
    "MissingHeaderError",
    "MalformedHeaderError",
    "FieldCountError",
    "NumericParseError",
    "MultiCharacterNucleotideError",
    "InvalidNucleotideError",
    "MissingSectionHeaderError",
]
