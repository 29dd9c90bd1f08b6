"""Cell-level primitives shared by the worksheet helper.

These functions read and write single ``openpyxl`` cells: text rendering,
border detection and typed value conversion. ``iter_cells`` walks only the
cells that already exist, in row-major order.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.cell.rich_text import CellRichText

if TYPE_CHECKING:
    from collections.abc import Iterator

    from openpyxl.cell.cell import Cell
    from openpyxl.worksheet.worksheet import Worksheet

__all__ = [
    "BORDERED_STYLES",
    "MAX_TEXT_LENGTH",
    "BorderEdge",
    "cell_value",
    "existing_cell",
    "group_rows",
    "is_blank",
    "is_bordered",
    "iter_cells",
    "render_cell",
]

# Every visible openpyxl border style ("none"/None are absent)
BORDERED_STYLES = frozenset(
    {
        "thin",
        "medium",
        "dashed",
        "dotted",
        "thick",
        "double",
        "hair",
        "mediumDashed",
        "dashDot",
        "mediumDashDot",
        "dashDotDot",
        "mediumDashDotDot",
        "slantDashDot",
    },
)

# Longest string a worksheet cell holds; openpyxl truncates past it
MAX_TEXT_LENGTH = 32_767

_STORED_AS_IS = (bool, dt.datetime, dt.date, dt.time, int, float, Decimal, CellRichText)


class BorderEdge(Enum):
    """Cell edge, valued by the matching ``openpyxl`` ``Border`` attribute."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


def iter_cells(worksheet: Worksheet) -> Iterator[Cell]:
    """Yield existing cells ordered by row, then column.

    ``Worksheet.iter_rows`` creates a cell for every coordinate in the used
    range, so the in-memory cell map is read directly instead.
    """
    cells = worksheet._cells  # noqa: SLF001
    for key in sorted(cells):
        yield cells[key]


def render_cell(cell: Cell) -> str:
    """Render a cell value as trimmed text.

    Returns
    -------
    str
        ``""`` for empty cells, ``"TRUE"``/``"FALSE"`` for booleans, the number
        as Python prints it for numerics (``30``, ``30.0``), ISO 8601 for dates
        and times, and stripped text otherwise.
    """
    value = cell.value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    return str(value).strip()


def is_blank(cell: Cell) -> bool:
    """True when the cell holds no value (empty strings count as blank)."""
    return cell.value is None or cell.value == ""


def is_bordered(cell: Cell, edge: BorderEdge) -> bool:
    """True when ``edge`` of ``cell`` has a visible border style."""
    side = getattr(cell.border, edge.value, None)
    if side is None:
        return False
    return side.style in BORDERED_STYLES


def cell_value(value: Any) -> Any:
    """Return the form in which ``value`` is stored in a cell.

    Booleans, dates and times, numbers, rich text and strings are stored as
    themselves; ``None`` (an empty cell) stays ``None``; anything else is
    stored as ``str(value)``.

    Raises
    ------
    ValueError
        If the text contains characters that XML cannot carry or is longer
        than ``MAX_TEXT_LENGTH``.
    """
    if value is None or isinstance(value, _STORED_AS_IS):
        return value
    if isinstance(value, str):
        return _checked_text(value)
    return _checked_text(str(value))


def existing_cell(worksheet: Worksheet, column: int, row: int) -> Cell | None:
    """Return the cell at a zero-based coordinate without creating it."""
    return worksheet._cells.get((row + 1, column + 1))  # noqa: SLF001


def group_rows(worksheet: Worksheet) -> dict[int, list[Cell]]:
    """Group existing cells by zero-based row index, both in ascending order."""
    rows: dict[int, list[Cell]] = {}
    for cell in iter_cells(worksheet):
        rows.setdefault(cell.row - 1, []).append(cell)
    return rows


def _checked_text(text: str) -> str:
    if ILLEGAL_CHARACTERS_RE.search(text):
        msg = f"Text contains control characters that cannot be stored in a cell: {text[:40]!r}"
        raise ValueError(msg)
    if len(text) > MAX_TEXT_LENGTH:
        msg = f"Text of {len(text)} characters exceeds the cell limit of {MAX_TEXT_LENGTH}"
        raise ValueError(msg)
    return text
