"""
Core package — table registry, build configuration, errors and shared helpers.
No pipeline logic lives here.
"""

from .schema import (
    BOOLEAN_TOKENS,
    EXPORT_RENAMES,
    METADATA_TABLE,
    PDB_TABLES,
    SENTINEL,
    TEST_PASSED_COLUMN,
)
from .config import BuildConfig
from .errors import PipelineError, SchemaMismatch, SourceUnavailable, WriteFailure
from .utils import Collection, column_difference, export_file_name, is_sentinel, row_counts

__all__ = [
    "BOOLEAN_TOKENS",
    "EXPORT_RENAMES",
    "METADATA_TABLE",
    "PDB_TABLES",
    "SENTINEL",
    "TEST_PASSED_COLUMN",
    "BuildConfig",
    "PipelineError",
    "SchemaMismatch",
    "SourceUnavailable",
    "WriteFailure",
    "Collection",
    "column_difference",
    "export_file_name",
    "is_sentinel",
    "row_counts",
]
