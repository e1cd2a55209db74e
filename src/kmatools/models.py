"""Models for the records decoded from KMA output files.

All models are frozen: a record is never modified once it has been
appended to a parse result.

Copyright © 2026 Pixelgen Technologies AB.
"""

from __future__ import annotations

from typing import Tuple

import pydantic

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class TabularRecord(pydantic.BaseModel):
    """Base class for the fixed-shape tabular records."""

    model_config = pydantic.ConfigDict(frozen=True)

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        """Return the names of the record fields in declared order."""
        return tuple(cls.model_fields.keys())

    @classmethod
    def from_values(cls, values) -> Self:
        """Create a record from values given in declared field order.

        :param values: the decoded field values
        :return: A record holding the values
        """
        return cls(**dict(zip(cls.field_names(), values)))


class SpaRecord(TabularRecord):
    """One line of a KMA .spa (summary) file.

    Coverages are fractions in [0, 1] rounded to 6 decimals.
    """

    template: str = pydantic.Field(description="The template name")
    num: pydantic.NonNegativeInt = pydantic.Field(description="Template number")
    score: pydantic.NonNegativeInt = pydantic.Field(description="Alignment score")
    expected: pydantic.NonNegativeInt = pydantic.Field(
        description="Expected score by chance"
    )
    tlen: pydantic.NonNegativeInt = pydantic.Field(description="Template length")
    qcov: float = pydantic.Field(description="Query coverage")
    tcov: float = pydantic.Field(description="Template coverage")
    depth: float = pydantic.Field(description="Depth")
    total_qcov: float = pydantic.Field(description="Total query coverage")
    total_tcov: float = pydantic.Field(description="Total template coverage")
    total_depth: float = pydantic.Field(description="Total depth")
    qval: float = pydantic.Field(description="q-value")
    pval: float = pydantic.Field(description="p-value")


class ResRecord(TabularRecord):
    """One line of a KMA .res (result) file.

    Coverages and identities are fractions in [0, 1] rounded to 6 decimals.
    """

    template: str = pydantic.Field(description="The template name")
    score: pydantic.NonNegativeInt = pydantic.Field(description="Alignment score")
    expected: pydantic.NonNegativeInt = pydantic.Field(
        description="Expected score by chance"
    )
    tlen: pydantic.NonNegativeInt = pydantic.Field(description="Template length")
    tid: float = pydantic.Field(description="Template identity")
    tcov: float = pydantic.Field(description="Template coverage")
    qid: float = pydantic.Field(description="Query identity")
    qcov: float = pydantic.Field(description="Query coverage")
    depth: float = pydantic.Field(description="Depth")
    qval: float = pydantic.Field(description="q-value")
    pval: float = pydantic.Field(description="p-value")


Depths = Tuple[
    pydantic.NonNegativeInt,
    pydantic.NonNegativeInt,
    pydantic.NonNegativeInt,
    pydantic.NonNegativeInt,
    pydantic.NonNegativeInt,
    pydantic.NonNegativeInt,
]


class MatrixRow(pydantic.BaseModel):
    """One position of a KMA .mat file.

    :ivar reference: the reference nucleotide, case as written in the file
    :ivar depths: the depths of A, C, G, T, N and gap, in that order
    """

    model_config = pydantic.ConfigDict(frozen=True)

    reference: str = pydantic.Field(min_length=1, max_length=1)
    depths: Depths

    @property
    def a(self) -> int:
        return self.depths[0]

    @property
    def c(self) -> int:
        return self.depths[1]

    @property
    def g(self) -> int:
        return self.depths[2]

    @property
    def t(self) -> int:
        return self.depths[3]

    @property
    def n(self) -> int:
        return self.depths[4]

    @property
    def gap(self) -> int:
        return self.depths[5]

    @property
    def total(self) -> int:
        """Return the summed depth over all symbols."""
        return sum(self.depths)


class MatrixSection(pydantic.BaseModel):
    """A named group of consecutive matrix rows (one template)."""

    model_config = pydantic.ConfigDict(frozen=True)

    name: str
    rows: Tuple[MatrixRow, ...] = pydantic.Field(min_length=1)
