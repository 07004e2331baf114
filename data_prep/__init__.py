"""
Data preparation — loading workbooks, augmenting tables, alignment checks.
"""

from .loader import load_workbook
from .tables import augment_column, augment_secondary
from .validators import ValidationResult, validate_alignment

__all__ = [
    "load_workbook",
    "augment_column",
    "augment_secondary",
    "ValidationResult",
    "validate_alignment",
]
