"""Worksheet helpers built on openpyxl.

* ``reference``: A1 parsing and zero-based ``CellIndex`` coordinates.
* ``cells``: rendering, border detection and typed assignment for one cell.
* ``beans``: declared header-label bindings for bean marshaling.
* ``sheet``: the ``FluentSheet`` facade over a worksheet.
* ``workbook``: load/save and sheet access.
"""

from fluent_common.sheet.beans import BeanSchema, column
from fluent_common.sheet.cells import BORDERED_STYLES, MAX_TEXT_LENGTH, BorderEdge
from fluent_common.sheet.reference import (
    CellIndex,
    column_index,
    column_letters,
    parse_a1,
    to_a1,
)
from fluent_common.sheet.sheet import FluentSheet
from fluent_common.sheet.workbook import FluentWorkbook

__all__ = [
    "BORDERED_STYLES",
    "BeanSchema",
    "BorderEdge",
    "CellIndex",
    "FluentSheet",
    "FluentWorkbook",
    "MAX_TEXT_LENGTH",
    "column",
    "column_index",
    "column_letters",
    "parse_a1",
    "to_a1",
]
