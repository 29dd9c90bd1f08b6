#!/usr/bin/env python3
"""Dump one worksheet to a tab-separated text file.

Usage (from project root):
    python -m fluent_common.main_dump book.xlsx
    python -m fluent_common.main_dump book.xlsx --sheet Summary --output-dir out
    python -m fluent_common.main_dump book.xlsx --name summary --extension .txt --indent-tabs 2

CLI Flags:
    INPUT               Workbook to read (.xlsx)
    --sheet             Worksheet name (default: active sheet)
    --output-dir, -o    Directory for the text file (default: OUTPUT_DIR)
    --name              Output base name (default: input file stem)
    --extension         Output extension (default: .tsv)
    --indent-tabs       Tabs between cells (default: 1)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fluent_common.catalog import Indentation
from fluent_common.config import DEFAULT_INDENT_TABS, OUTPUT_DIR, setup_logging
from fluent_common.exceptions import SheetHandlingError
from fluent_common.sheet import FluentSheet, FluentWorkbook
from fluent_common.utils import FluentFile

logger = setup_logging(__name__)


def render_sheet(sheet: FluentSheet, indent_tabs: int = DEFAULT_INDENT_TABS) -> str:
    """Join the sheet's string dump into text, one line per row.

    Parameters
    ----------
    sheet : FluentSheet
        Worksheet view to dump.
    indent_tabs : int, optional
        Number of tab characters between cells.

    Returns
    -------
    str
        Rows joined with the platform line separator, with a trailing one.
    """
    separator = Indentation.indent_tabs(indent_tabs)
    new_line = FluentFile.new_line()
    lines = [separator.join(row) for row in sheet.as_string_list()]
    return "".join(f"{line}{new_line}" for line in lines)


def dump_sheet(
    input_path: Path,
    sheet_name: str | None = None,
    output_dir: Path | None = None,
    name: str | None = None,
    extension: str = ".tsv",
    indent_tabs: int = DEFAULT_INDENT_TABS,
) -> Path | None:
    """Load a workbook and write one worksheet as text.

    Returns
    -------
    Path | None
        Written file, or ``None`` if the sheet is missing or the write failed.
    """
    workbook = FluentWorkbook.load(input_path)
    try:
        sheet = workbook.sheet(sheet_name)
    except SheetHandlingError as exc:
        logger.error("%s", exc)
        return None

    writer = FluentFile(output_dir if output_dir is not None else OUTPUT_DIR)
    outcome = writer.write(name or input_path.stem, extension, render_sheet(sheet, indent_tabs))
    if not outcome.ok:
        logger.error("Dump failed: %s", outcome.error)
        return None
    return outcome.value


# =============================================================================
# CLI
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    """Parse CLI flags and dump the requested worksheet.

    Returns
    -------
    int
        ``0`` when the file was written; ``1`` otherwise.
    """
    parser = argparse.ArgumentParser(
        description="Dump a worksheet to a tab-separated text file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m fluent_common.main_dump book.xlsx
  python -m fluent_common.main_dump book.xlsx --sheet Summary -o out
        """,
    )
    parser.add_argument("input", type=Path, help="Workbook to read (.xlsx)")
    parser.add_argument("--sheet", default=None, help="Worksheet name (default: active sheet)")
    parser.add_argument("--output-dir", "-o", type=Path, default=None, help="Output directory")
    parser.add_argument("--name", default=None, help="Output base name (default: input stem)")
    parser.add_argument("--extension", default=".tsv", help="Output extension (default: .tsv)")
    parser.add_argument("--indent-tabs", type=int, default=DEFAULT_INDENT_TABS, help="Tabs between cells")

    args = parser.parse_args(argv)

    if args.indent_tabs < 1:
        parser.error("--indent-tabs must be at least 1")
    if not args.input.exists():
        logger.error("Workbook not found: %s", args.input)
        return 1

    written = dump_sheet(
        input_path=args.input,
        sheet_name=args.sheet,
        output_dir=args.output_dir,
        name=args.name,
        extension=args.extension,
        indent_tabs=args.indent_tabs,
    )
    return 0 if written is not None else 1


if __name__ == "__main__":
    sys.exit(main())
