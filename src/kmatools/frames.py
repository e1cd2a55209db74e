"""
Conversion of parse results to pandas DataFrames

Copyright © 2026 Pixelgen Technologies AB.
"""
from __future__ import annotations

from typing import Sequence, Type

import numpy as np
import pandas as pd

from kmatools.models import MatrixSection, TabularRecord

MATRIX_DEPTH_COLUMNS = ["A", "C", "G", "T", "N", "gap"]
MATRIX_COLUMNS = ["section", "position", "reference"] + MATRIX_DEPTH_COLUMNS


def records_to_dataframe(
    records: Sequence[TabularRecord], record_type: Type[TabularRecord]
) -> pd.DataFrame:
    """
    Build a DataFrame with one row per record and one column per field.

    :param records: the records of a .spa or .res file
    :param record_type: the record class, used for the column names
    :returns: the DataFrame, with all columns even if `records` is empty
    """
    columns = list(record_type.field_names())
    return pd.DataFrame(
        [tuple(r.model_dump().values()) for r in records], columns=columns
    )


def sections_to_dataframe(sections: Sequence[MatrixSection]) -> pd.DataFrame:
    """
    Build a long format DataFrame of all matrix rows.

    The `position` column is the 1-based position of the row in its section.

    :param sections: the sections of a .mat file
    :returns: the DataFrame
    """
    data = [
        (section.name, position, row.reference, *row.depths)
        for section in sections
        for position, row in enumerate(section.rows, start=1)
    ]
    df = pd.DataFrame(data, columns=MATRIX_COLUMNS)
    dtypes = {"position": np.int64, **{c: np.uint32 for c in MATRIX_DEPTH_COLUMNS}}
    return df.astype(dtypes)
