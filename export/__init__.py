"""
Export — flat text files that make up the on-disk database.
"""

from .writer import clear_output_dir, export_collection, write_table

__all__ = [
    "clear_output_dir",
    "export_collection",
    "write_table",
]
