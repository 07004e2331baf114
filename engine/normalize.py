from __future__ import annotations

from typing import Mapping

import pandas as pd

from core.errors import PipelineError
from core.schema import SENTINEL
from core.utils import Collection, is_sentinel


def normalize_table(table: pd.DataFrame, *, sentinel: str = SENTINEL) -> pd.DataFrame:
    """
    Return a plain frame where placeholder cells are truly missing.

    A cell is replaced only when its whole value equals `sentinel`. Columns are
    then moved to pandas nullable dtypes so missing is always `pd.NA`.
    Applying this twice gives the same result as applying it once.
    """
    frame = pd.DataFrame(table, copy=True).reset_index(drop=True)
    frame.columns = [str(c) for c in frame.columns]

    for col in frame.columns:
        series = frame[col]
        hits = series.map(lambda v: is_sentinel(v, sentinel)).astype(bool)
        if hits.any():
            frame[col] = series.astype(object).mask(hits, pd.NA)

    return frame.convert_dtypes()


def normalize_collection(collection: Mapping[str, pd.DataFrame], *, sentinel: str = SENTINEL) -> Collection:
    out: Collection = {}
    for name, table in collection.items():
        try:
            out[name] = normalize_table(table, sentinel=sentinel)
        except (TypeError, ValueError) as exc:
            raise PipelineError(f"Could not normalize: {exc}", stage="normalize", table=name) from exc
    return out
