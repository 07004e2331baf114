"""
Build the PADRINO flat text tables from the two curation workbooks.

Run from the repository root with no arguments:

    pdb-build-flat-sheets
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from core.config import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PRIMARY_PATH,
    DEFAULT_SECONDARY_PATH,
    BuildConfig,
)
from core.errors import PipelineError
from engine.runner import build_flat_sheets

LOGGER = logging.getLogger(__name__)


def configure_logging(verbosity: int) -> None:
    level = logging.DEBUG if verbosity > 0 else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Merge the hand-curated and secondary PADRINO workbooks into flat .txt tables.",
    )
    parser.add_argument("--root", type=Path, default=Path("."), help="Repository root (default: cwd).")
    parser.add_argument("--primary", type=Path, default=DEFAULT_PRIMARY_PATH,
                        help="Hand-curated workbook, relative to --root.")
    parser.add_argument("--secondary", type=Path, default=DEFAULT_SECONDARY_PATH,
                        help="Secondary workbook, relative to --root.")
    parser.add_argument("--output-dir", type=Path, default=DEFAULT_OUTPUT_DIR,
                        help="Directory whose contents are replaced, relative to --root.")
    parser.add_argument("--no-column-check", action="store_true",
                        help="Skip the column-set comparison between the two workbooks.")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    config = BuildConfig.for_root(
        args.root,
        primary_path=args.primary,
        secondary_path=args.secondary,
        output_dir=args.output_dir,
        check_columns=not args.no_column_check,
    )

    try:
        report = build_flat_sheets(config)
    except PipelineError as exc:
        LOGGER.error("Build failed during %s%s: %s",
                     exc.stage, f" ({exc.table})" if exc.table else "", exc.detail)
        return 1

    LOGGER.info(report.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
