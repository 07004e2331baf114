from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Tuple

import pandas as pd

# One side of the database: logical table name -> table.
Collection = Dict[str, pd.DataFrame]


def is_sentinel(value: Any, sentinel: str) -> bool:
    """Full-cell match against the placeholder token; substrings never count."""
    return isinstance(value, str) and value == sentinel


def column_difference(left: Iterable[str], right: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Return (columns only in left, columns only in right), each in original order."""
    left = list(left)
    right = list(right)
    only_left = [c for c in left if c not in right]
    only_right = [c for c in right if c not in left]
    return only_left, only_right


def row_counts(collection: Mapping[str, pd.DataFrame]) -> Dict[str, int]:
    return {name: int(len(df)) for name, df in collection.items()}


def export_file_name(table: str, renames: Mapping[str, str]) -> str:
    """File name a table is written under; only a few tables are renamed on export."""
    return f"{renames.get(table, table)}.txt"
