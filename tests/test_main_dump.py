"""Tests for the worksheet dump CLI."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fluent_common.main_dump import dump_sheet, main, render_sheet
from fluent_common.sheet import FluentSheet, FluentWorkbook


@pytest.fixture
def book_path(tmp_path: Path) -> Path:
    """Workbook with two rows on a sheet named Data."""
    book = FluentWorkbook()
    book.create_sheet("Data").put("A1", "a").put("B1", "b").put("A2", 1).put("B2", " two ")
    return book.save(tmp_path / "book.xlsx")


def read_text(path: Path) -> str:
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


class TestRenderSheet:
    """Tests for text rendering."""

    def test_tabs_and_line_endings(self, fluent: FluentSheet) -> None:
        """Cells are tab-separated and every row ends with a line separator."""
        fluent.put("A1", "a").put("B1", "b").put("A2", "c")

        assert render_sheet(fluent) == f"a\tb{os.linesep}c{os.linesep}"
        assert render_sheet(fluent, indent_tabs=2) == f"a\t\tb{os.linesep}c{os.linesep}"

    def test_empty_sheet(self, fluent: FluentSheet) -> None:
        """An empty sheet renders as empty text."""
        assert render_sheet(fluent) == ""


class TestDumpSheet:
    """Tests for the programmatic dump."""

    def test_writes_named_sheet(self, book_path: Path, tmp_path: Path) -> None:
        """The named sheet is written under the output directory."""
        written = dump_sheet(book_path, "Data", tmp_path / "out", name="data", extension=".txt")

        assert written == tmp_path / "out" / "data.txt"
        assert read_text(written) == f"a\tb{os.linesep}1\ttwo{os.linesep}"

    def test_missing_sheet(self, book_path: Path, tmp_path: Path) -> None:
        """A missing sheet yields None and writes nothing."""
        assert dump_sheet(book_path, "Nope", tmp_path / "out") is None
        assert not (tmp_path / "out").exists()


class TestMain:
    """Tests for the CLI entry point."""

    def test_success(self, book_path: Path, tmp_path: Path) -> None:
        """Exit code 0 and a .tsv named after the input."""
        out_dir = tmp_path / "out"

        code = main([str(book_path), "--sheet", "Data", "-o", str(out_dir)])

        assert code == 0
        assert read_text(out_dir / "book.tsv").startswith(f"a\tb{os.linesep}")

    def test_missing_sheet(self, book_path: Path, tmp_path: Path) -> None:
        """An unknown sheet exits with 1."""
        assert main([str(book_path), "--sheet", "Nope", "-o", str(tmp_path / "out")]) == 1

    def test_missing_input(self, tmp_path: Path) -> None:
        """A missing workbook exits with 1."""
        assert main([str(tmp_path / "absent.xlsx"), "-o", str(tmp_path / "out")]) == 1

    def test_invalid_indent(self, book_path: Path) -> None:
        """Fewer than one tab is a usage error."""
        with pytest.raises(SystemExit) as excinfo:
            main([str(book_path), "--indent-tabs", "0"])

        assert excinfo.value.code == 2
