"""
Flat-file exporter.

Two phases: clear the output directory, then write one tab-delimited text
file per table. Every field is quoted and missing cells are written as "NA".
A failure after clearing leaves the directory partially written.
"""

from __future__ import annotations

import csv
import logging
import shutil
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

import numpy as np
import pandas as pd

from core.errors import WriteFailure
from core.schema import BOOLEAN_TOKENS, SENTINEL
from core.utils import export_file_name

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]


def clear_output_dir(output_dir: PathLike) -> Path:
    """Create `output_dir` if needed, otherwise delete everything inside it."""
    output_dir = Path(output_dir)
    try:
        if not output_dir.exists():
            output_dir.mkdir(parents=True)
            return output_dir
        for entry in sorted(output_dir.iterdir()):
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
            LOGGER.debug("Removed %s", entry)
    except OSError as exc:
        raise WriteFailure(f"Could not clear {output_dir}: {exc}", stage="clear") from exc
    return output_dir


def _render_booleans(table: pd.DataFrame) -> pd.DataFrame:
    """Write logicals the way the R interface reads them."""
    out = table.copy()
    for col in out.columns:
        series = out[col]
        if not (pd.api.types.is_bool_dtype(series.dtype) or series.dtype == object):
            continue
        flags = series.map(lambda v: isinstance(v, (bool, np.bool_)))
        if flags.astype(bool).any():
            out[col] = series.map(
                lambda v: BOOLEAN_TOKENS[bool(v)] if isinstance(v, (bool, np.bool_)) else v,
                na_action="ignore",
            ).astype(object)
    return out


def write_table(
    table: pd.DataFrame,
    path: PathLike,
    *,
    delimiter: str = "\t",
    na_rep: str = SENTINEL,
    encoding: str = "utf-8",
    name: Optional[str] = None,
) -> Path:
    path = Path(path)
    try:
        _render_booleans(table).to_csv(
            path,
            sep=delimiter,
            quoting=csv.QUOTE_ALL,
            na_rep=na_rep,
            index=False,
            encoding=encoding,
            lineterminator="\n",
        )
    except OSError as exc:
        raise WriteFailure(f"Could not write {path}: {exc}", table=name) from exc
    return path


def export_collection(
    collection: Mapping[str, pd.DataFrame],
    output_dir: PathLike,
    *,
    renames: Optional[Mapping[str, str]] = None,
    delimiter: str = "\t",
    na_rep: str = SENTINEL,
    encoding: str = "utf-8",
) -> Dict[str, Path]:
    """
    Replace the contents of `output_dir` with one `<table>.txt` per table.
    Returns table name -> written path, in collection order.
    """
    renames = renames or {}
    output_dir = clear_output_dir(output_dir)

    written: Dict[str, Path] = {}
    for name, table in collection.items():
        path = write_table(
            table,
            output_dir / export_file_name(name, renames),
            delimiter=delimiter,
            na_rep=na_rep,
            encoding=encoding,
            name=name,
        )
        LOGGER.info("Wrote %s (%d rows) to %s", name, len(table), path)
        written[name] = path
    return written
