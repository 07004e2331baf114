from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

import pandas as pd

from core.errors import PipelineError
from core.utils import Collection, column_difference

LOGGER = logging.getLogger(__name__)


def merge_tables(primary: pd.DataFrame, secondary: Optional[pd.DataFrame]) -> pd.DataFrame:
    """
    Stack secondary rows under primary rows.

    Columns follow the primary's order. When the two sides share a column set
    the secondary is reordered to match; otherwise pandas' union alignment is
    left to show the mismatch in the output.
    """
    if secondary is None:
        return primary.reset_index(drop=True)

    only_p, only_s = column_difference(primary.columns, secondary.columns)
    if not only_p and not only_s:
        secondary = secondary.loc[:, list(primary.columns)]

    return pd.concat([primary, secondary], axis=0, ignore_index=True, sort=False)


def merge_collections(
    primary: Mapping[str, pd.DataFrame],
    secondary: Mapping[str, pd.DataFrame],
    tables: Sequence[str],
) -> Collection:
    """
    Merge two collections table by table, in registry order.

    Only names present in the primary are merged; a table missing from the
    secondary passes through unchanged. Secondary-only tables are dropped.
    """
    merged: Collection = {}
    for name in tables:
        if name not in primary:
            if name in secondary:
                LOGGER.warning("Table %s only exists in the secondary source; skipped.", name)
            continue

        other = secondary.get(name)
        try:
            merged[name] = merge_tables(primary[name], other)
        except (TypeError, ValueError) as exc:
            raise PipelineError(f"Could not combine rows: {exc}", stage="merge", table=name) from exc

        if other is None:
            LOGGER.info("Table %s has no secondary rows; kept as is.", name)
        LOGGER.info("Table %s successfully combined.", name)

    return merged
