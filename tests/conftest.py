"""Pytest configuration for fluent_common tests.

This module provides:
- ``.env`` loading from the project root
- Worksheet fixtures (fresh workbook, its active sheet, a ``FluentSheet`` view)
- A helper fixture for drawing borders
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from dotenv import load_dotenv
from openpyxl import Workbook
from openpyxl.styles import Border, Side
from openpyxl.worksheet.worksheet import Worksheet

from fluent_common.sheet import FluentSheet

PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")


@pytest.fixture
def workbook() -> Workbook:
    """Fresh in-memory workbook."""
    return Workbook()


@pytest.fixture
def worksheet(workbook: Workbook) -> Worksheet:
    """Active worksheet of a fresh workbook (no cells yet)."""
    return workbook.active


@pytest.fixture
def fluent(worksheet: Worksheet) -> FluentSheet:
    """``FluentSheet`` view over the empty worksheet."""
    return FluentSheet(worksheet)


@pytest.fixture
def draw_border(worksheet: Worksheet) -> Callable[..., None]:
    """Return a function that borders one zero-based cell on the given edges."""

    def _draw(column: int, row: int, style: str = "thin", **edges: bool) -> None:
        side = Side(style=style)
        worksheet.cell(row=row + 1, column=column + 1).border = Border(
            **{edge: side for edge, enabled in edges.items() if enabled},
        )

    return _draw
