"""
Build engine — merge, normalize and the end-to-end runner.
"""

from .merge import merge_collections, merge_tables
from .normalize import normalize_collection, normalize_table
from .runner import BuildReport, build_flat_sheets

__all__ = [
    "merge_collections",
    "merge_tables",
    "normalize_collection",
    "normalize_table",
    "BuildReport",
    "build_flat_sheets",
]
