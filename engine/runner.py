"""
Flat-sheet build runner — orchestrates one curator run end to end.

Stages, strictly forward:
  1. load       primary and secondary workbooks, one sheet per registry table
  2. augment    give secondary Metadata the .test_passed flag
  3. validate   column sets must agree between sources (optional)
  4. merge      primary rows first, secondary rows after
  5. normalize  literal "NA" cells -> missing, nullable dtypes
  6. export     clear the output directory, write one .txt per table

Any failure raises a PipelineError naming the stage and table; nothing is
retried or rolled back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from core.config import BuildConfig
from core.errors import SchemaMismatch
from core.utils import row_counts
from data_prep.loader import load_workbook
from data_prep.tables import augment_secondary
from data_prep.validators import validate_alignment
from export.writer import export_collection

from .merge import merge_collections
from .normalize import normalize_collection

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildReport:
    """What a successful run produced."""
    output_dir: Path
    paths: Dict[str, Path] = field(default_factory=dict)
    rows: Dict[str, int] = field(default_factory=dict)

    @property
    def tables(self) -> List[str]:
        return list(self.paths)

    def summary(self) -> str:
        lines = [f"Wrote {len(self.paths)} tables to {self.output_dir}:"]
        for name, path in self.paths.items():
            lines.append(f"  {path.name:<28} {self.rows.get(name, 0):>6} rows")
        return "\n".join(lines)


def build_flat_sheets(config: BuildConfig) -> BuildReport:
    """
    Merge the primary and secondary workbooks into flat text files.

    Parameters
    ----------
    config : BuildConfig
        Workbook and output locations, table registry and on-disk format.

    Returns
    -------
    BuildReport with the written path and row count of every table.
    """
    cfg = config
    tables = tuple(cfg.tables)

    LOGGER.info("Loading primary workbook %s", cfg.primary_path)
    primary = load_workbook(cfg.primary_path, tables)
    LOGGER.info("Loading secondary workbook %s", cfg.secondary_path)
    secondary = load_workbook(cfg.secondary_path, tables)

    secondary = augment_secondary(secondary)

    if cfg.check_columns:
        result = validate_alignment(primary, secondary, tables)
        for warning in result.warnings:
            LOGGER.warning(warning)
        if not result.is_valid:
            first = result.failed_tables[0] if result.failed_tables else None
            raise SchemaMismatch(result.summary(), table=first)

    merged = merge_collections(primary, secondary, tables)
    normalized = normalize_collection(merged, sentinel=cfg.sentinel)

    LOGGER.info("Replacing contents of %s", cfg.output_dir)
    paths = export_collection(
        normalized,
        cfg.output_dir,
        renames=cfg.rename_map,
        delimiter=cfg.delimiter,
        na_rep=cfg.sentinel,
        encoding=cfg.encoding,
    )

    return BuildReport(output_dir=Path(cfg.output_dir), paths=paths, rows=row_counts(normalized))
