from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Sequence, Union

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException
from xlrd import XLRDError

from core.errors import SchemaMismatch, SourceUnavailable
from core.utils import Collection

LOGGER = logging.getLogger(__name__)

# What pandas and its Excel engines raise for files that are not readable
# workbooks (a zip without workbook parts surfaces as a KeyError subclass).
_UNREADABLE = (OSError, ValueError, KeyError, zipfile.BadZipFile, InvalidFileException, XLRDError)


def load_workbook(path: Union[str, Path], tables: Sequence[str]) -> Collection:
    """
    Read one sheet per registry table from a PADRINO workbook.

    Cells are taken verbatim: only empty cells become missing, so a literal
    "NA" typed into a cell is still text here. Sheets outside the registry
    are ignored. Returns tables in registry order.
    """
    path = Path(path)
    if not path.is_file():
        raise SourceUnavailable(f"Workbook not found: {path}")

    try:
        book = pd.ExcelFile(path)
    except _UNREADABLE as exc:
        raise SourceUnavailable(f"Could not open workbook {path}: {exc}") from exc

    with book:
        sheets = list(book.sheet_names)
        missing = [t for t in tables if t not in sheets]
        if missing:
            raise SchemaMismatch(
                f"Workbook {path.name} is missing tables: {missing}",
                stage="load",
                table=missing[0],
            )

        extra = [s for s in sheets if s not in tables]
        if extra:
            LOGGER.debug("Ignoring sheets outside the registry in %s: %s", path.name, extra)

        collection: Collection = {}
        for name in tables:
            try:
                df = book.parse(name, keep_default_na=False, na_values=[""])
            except _UNREADABLE as exc:
                raise SourceUnavailable(
                    f"Could not read sheet from {path.name}: {exc}", table=name
                ) from exc
            df.columns = [str(c) for c in df.columns]
            collection[name] = df
            LOGGER.debug("Loaded %s from %s (%d rows)", name, path.name, len(df))

    return collection
