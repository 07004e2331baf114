"""
Pure table transformations applied between loading and merging.
Loaded frames are never edited in place; every helper returns a new object.
"""

from __future__ import annotations

from typing import Any, Mapping

import pandas as pd

from core.schema import METADATA_TABLE, TEST_PASSED_COLUMN
from core.utils import Collection


def augment_column(table: pd.DataFrame, column: str, default: Any = pd.NA) -> pd.DataFrame:
    """Return a copy of `table` with `column` appended and filled with `default`.

    If the column already exists the copy is returned untouched.
    """
    out = table.copy()
    if column in out.columns:
        return out
    out[column] = pd.Series([default] * len(out), index=out.index, dtype="object")
    return out


def augment_secondary(
    collection: Mapping[str, pd.DataFrame],
    *,
    table: str = METADATA_TABLE,
    column: str = TEST_PASSED_COLUMN,
) -> Collection:
    """
    Give the secondary collection the validation flag only the primary tracks.
    The flag starts out missing for every secondary row.
    """
    out: Collection = dict(collection)
    if table in out:
        out[table] = augment_column(out[table], column, pd.NA)
    return out
