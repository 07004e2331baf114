"""
Build configuration.
Paths default to the repository-relative locations used by the release process.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Tuple, Union

from .schema import EXPORT_RENAMES, PDB_TABLES, SENTINEL
from .utils import export_file_name

PathLike = Union[str, Path]

DEFAULT_PRIMARY_PATH = Path("padrino-database/xl/hand_cleaned_padrino.xlsx")
DEFAULT_SECONDARY_PATH = Path("padrino-database/xl/pdb_tomos.xlsx")
DEFAULT_OUTPUT_DIR = Path("padrino-database/raw")


@dataclass(frozen=True)
class BuildConfig:
    primary_path: Path = DEFAULT_PRIMARY_PATH
    secondary_path: Path = DEFAULT_SECONDARY_PATH
    output_dir: Path = DEFAULT_OUTPUT_DIR

    tables: Tuple[str, ...] = PDB_TABLES
    # (table, file stem) pairs; a tuple keeps the config hashable
    renames: Tuple[Tuple[str, str], ...] = tuple(EXPORT_RENAMES.items())

    # on-disk format
    sentinel: str = SENTINEL
    delimiter: str = "\t"
    encoding: str = "utf-8"

    # reject column-set mismatches between the two sources before merging
    check_columns: bool = True

    @classmethod
    def for_root(cls, root: PathLike, **overrides) -> "BuildConfig":
        """Resolve the default workbook and output locations against a repository root."""
        root = Path(root)
        cfg = cls(**overrides)
        return replace(
            cfg,
            primary_path=root / cfg.primary_path,
            secondary_path=root / cfg.secondary_path,
            output_dir=root / cfg.output_dir,
        )

    @property
    def rename_map(self) -> Dict[str, str]:
        return dict(self.renames)

    def export_name(self, table: str) -> str:
        return export_file_name(table, self.rename_map)
