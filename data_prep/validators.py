"""
Pre-merge alignment checks between the primary and secondary collections.

Catches problems before any output is touched:
- Registry tables absent from the primary collection
- Column sets that disagree between the two sources
- Tables only the primary provides (merged unchanged)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Sequence

import pandas as pd

from core.utils import column_difference


@dataclass
class ValidationResult:
    """Collects all alignment warnings/errors for a pair of collections."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    # table names the errors refer to, in registry order
    failed_tables: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_alignment(
    primary: Mapping[str, pd.DataFrame],
    secondary: Mapping[str, pd.DataFrame],
    tables: Sequence[str],
) -> ValidationResult:
    """
    Check that every registry table lines up between the two sources.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    for name in tables:
        if name not in primary:
            result.errors.append(f"{name}: missing from the primary collection.")
            result.failed_tables.append(name)
            continue

        if name not in secondary:
            result.warnings.append(f"{name}: only in the primary collection, merged unchanged.")
            continue

        p_cols = list(primary[name].columns)
        s_cols = list(secondary[name].columns)
        only_p, only_s = column_difference(p_cols, s_cols)
        if only_p or only_s:
            result.errors.append(
                f"{name}: column sets differ (primary only: {only_p}, secondary only: {only_s})."
            )
            result.failed_tables.append(name)
        elif p_cols != s_cols:
            result.warnings.append(
                f"{name}: secondary columns are in a different order; primary order is kept."
            )

    return result
