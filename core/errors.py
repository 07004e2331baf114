"""
Pipeline error taxonomy.

Every failure aborts the run. The message carries the stage and, where known,
the table name so a curator can fix the workbook and re-run from scratch.
"""

from __future__ import annotations

from typing import Optional


class PipelineError(Exception):
    stage = "pipeline"

    def __init__(self, message: str, *, stage: Optional[str] = None, table: Optional[str] = None):
        self.stage = stage or self.stage
        self.table = table
        self.detail = message
        where = f"[{self.stage}]" if table is None else f"[{self.stage}:{table}]"
        super().__init__(f"{where} {message}")


class SourceUnavailable(PipelineError):
    """A workbook cannot be opened or read."""

    stage = "load"


class SchemaMismatch(PipelineError):
    """A registry table is missing from a source, or column sets disagree."""

    stage = "validate"


class WriteFailure(PipelineError):
    """The output directory cannot be cleared or a table cannot be written."""

    stage = "write"
