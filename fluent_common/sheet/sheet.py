"""Stateless query/mutation facade over one ``openpyxl`` worksheet.

``FluentSheet`` never caches anything: every call re-reads the live
worksheet, which stays owned by the caller.

Addressing
----------
Three forms are accepted by the ``get``/``put`` families:

* ``get("B7")`` - A1 reference.
* ``get_by_column("B", 7)`` - column letters and 1-based row number.
* ``get_at(1, 6)`` - zero-based column and row indexes.

Lookup conventions
------------------
* A missing cell on ``get*`` raises :class:`SheetHandlingError`.
* ``find_*`` searches return ``None`` when nothing matches.
* ``get_region_sequence`` returns ``""`` when no value is found.
* Bean marshaling raises :class:`BeanMappingError` on the first failing row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pandas as pd
from openpyxl.worksheet.worksheet import Worksheet

from fluent_common.config import setup_logging
from fluent_common.exceptions import BeanMappingError, SheetHandlingError
from fluent_common.sheet.beans import BeanSchema
from fluent_common.sheet.cells import (
    BorderEdge,
    cell_value,
    existing_cell,
    group_rows,
    is_blank,
    is_bordered,
    iter_cells,
    render_cell,
)
from fluent_common.sheet.reference import CellIndex, column_index, parse_a1

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from openpyxl.cell.cell import Cell

logger = setup_logging(__name__)

__all__ = ["FluentSheet"]


def _require_index(column: int, row: int) -> None:
    if column < 0:
        msg = f"Column index must not be negative, got {column}"
        raise ValueError(msg)
    if row < 0:
        msg = f"Row index must not be negative, got {row}"
        raise ValueError(msg)


def _require_row_number(row_number: int) -> None:
    if row_number < 1:
        msg = f"Row number is 1-based, got {row_number}"
        raise ValueError(msg)


def _index_of(cell: Cell) -> CellIndex:
    return CellIndex(cell.column - 1, cell.row - 1)


class FluentSheet:
    """Cell access, search, region detection and bean mapping for a worksheet."""

    def __init__(self, sheet: Worksheet) -> None:
        if sheet is None:
            msg = "Worksheet is required."
            raise ValueError(msg)
        if not isinstance(sheet, Worksheet):
            msg = f"Expected an openpyxl Worksheet, got {type(sheet).__name__}"
            raise TypeError(msg)
        self._sheet = sheet

    @property
    def sheet(self) -> Worksheet:
        return self._sheet

    def __repr__(self) -> str:
        return f"FluentSheet(title={self._sheet.title!r})"

    # =========================================================================
    # Cell values
    # =========================================================================

    def get(self, reference: str) -> str:
        """Return the rendered value of the cell named by an A1 reference.

        Raises
        ------
        ValueError
            If ``reference`` is empty or malformed.
        SheetHandlingError
            If no cell exists at that coordinate.
        """
        index = parse_a1(reference)
        return self.get_at(index.column, index.row)

    def get_by_column(self, letters: str, row_number: int) -> str:
        """Return the rendered value at column ``letters``, 1-based ``row_number``."""
        _require_row_number(row_number)
        return self.get_at(column_index(letters), row_number - 1)

    def get_at(self, column: int, row: int) -> str:
        """Return the rendered value at a zero-based coordinate.

        Returns
        -------
        str
            Trimmed text, or the numeric value as text.

        Raises
        ------
        SheetHandlingError
            If no cell exists at ``(column, row)``.
        """
        _require_index(column, row)
        cell = existing_cell(self._sheet, column, row)
        if cell is None:
            msg = f"Cell (column index = {column}, row index = {row}) does not exist."
            raise SheetHandlingError(msg)
        return render_cell(cell)

    def put(self, reference: str, value: Any) -> FluentSheet:
        """Store ``value`` in the cell named by an A1 reference."""
        index = parse_a1(reference)
        return self.put_at(index.column, index.row, value)

    def put_by_column(self, letters: str, row_number: int, value: Any) -> FluentSheet:
        """Store ``value`` at column ``letters``, 1-based ``row_number``."""
        _require_row_number(row_number)
        return self.put_at(column_index(letters), row_number - 1, value)

    def put_at(self, column: int, row: int, value: Any) -> FluentSheet:
        """Store ``value`` at a zero-based coordinate, creating the cell if needed.

        Raises
        ------
        ValueError
            If the coordinate is negative or the text cannot be stored; the
            worksheet is left unchanged.
        """
        _require_index(column, row)
        stored = cell_value(value)
        self._sheet.cell(row=row + 1, column=column + 1).value = stored
        return self

    # =========================================================================
    # Value search
    # =========================================================================

    def has_value(self, value: str) -> bool:
        """Return True if any cell renders exactly as ``value``.

        Raises
        ------
        ValueError
            If ``value`` is empty.
        """
        return self.find_cell_index(value) is not None

    def find_cell_index(self, value: str) -> CellIndex | None:
        """Return the first cell (row-major) whose rendered text equals ``value``.

        Raises
        ------
        ValueError
            If ``value`` is empty or ``None``.
        """
        if not value:
            msg = "Search value is required."
            raise ValueError(msg)
        for cell in iter_cells(self._sheet):
            if render_cell(cell) == value:
                return _index_of(cell)
        return None

    def find_row_index(self, value: str) -> int | None:
        """Return the zero-based row of the first match, or None."""
        index = self.find_cell_index(value)
        return None if index is None else index.row

    def find_column_index(self, value: str) -> int | None:
        """Return the zero-based column of the first match, or None."""
        index = self.find_cell_index(value)
        return None if index is None else index.column

    # =========================================================================
    # Border search
    # =========================================================================

    def find_border_top_index(self, start_column: int = 0, start_row: int = 0) -> CellIndex | None:
        """First cell at/after the start whose top edge is bordered."""
        return self._find_border(BorderEdge.TOP, start_column, start_row)

    def find_border_bottom_index(self, start_column: int = 0, start_row: int = 0) -> CellIndex | None:
        """First cell at/after the start whose bottom edge is bordered."""
        return self._find_border(BorderEdge.BOTTOM, start_column, start_row)

    def find_border_left_index(self, start_column: int = 0, start_row: int = 0) -> CellIndex | None:
        """First cell at/after the start whose left edge is bordered."""
        return self._find_border(BorderEdge.LEFT, start_column, start_row)

    def find_border_right_index(self, start_column: int = 0, start_row: int = 0) -> CellIndex | None:
        """First cell at/after the start whose right edge is bordered."""
        return self._find_border(BorderEdge.RIGHT, start_column, start_row)

    def _find_border(self, edge: BorderEdge, start_column: int, start_row: int) -> CellIndex | None:
        _require_index(start_column, start_row)
        for cell in self._cells_from(start_column, start_row):
            if is_bordered(cell, edge):
                return _index_of(cell)
        return None

    def _cells_from(self, start_column: int, start_row: int) -> Iterator[Cell]:
        # Rows from start_row down; within each row only columns >= start_column
        for cell in iter_cells(self._sheet):
            if cell.row - 1 >= start_row and cell.column - 1 >= start_column:
                yield cell

    # =========================================================================
    # Regions
    # =========================================================================

    def get_region_sequence(self, base_column: int, base_row: int) -> str:
        """Return the first value inside the bordered region right of a base cell.

        The region starts at the first left border at or after
        ``(base_column + 1, base_row)`` and ends at the first right border at or
        after one column past that start. Cells inside the rectangle are scanned
        row by row; the first non-empty rendered value wins.

        Returns
        -------
        str
            The value, or ``""`` if either border or any value is missing.
        """
        _require_index(base_column, base_row)

        start = self.find_border_left_index(base_column + 1, base_row)
        if start is None:
            logger.debug("No left border after (%d, %d)", base_column, base_row)
            return ""

        end = self.find_border_right_index(start.column + 1, start.row)
        if end is None:
            logger.debug("No right border after %s", start)
            return ""

        for cell in iter_cells(self._sheet):
            column, row = _index_of(cell)
            if start.row <= row <= end.row and start.column <= column <= end.column:
                text = render_cell(cell)
                if text:
                    return text
        return ""

    def get_matrix_list(self, start_column: int, start_row: int) -> list[dict[str, str]]:
        """Read a bordered table into one ``header -> value`` record per row.

        Headers are the non-blank cells of ``start_row`` at or right of
        ``start_column``. In each following row, a non-blank cell fills the
        current header and advances to the next one. A blank cell with a right
        border closes a (possibly merged) column: it advances the header only
        when no value was taken since the previous boundary, so empty bordered
        columns are skipped.
        """
        _require_index(start_column, start_row)
        rows = group_rows(self._sheet)

        headers = [
            render_cell(cell)
            for cell in rows.get(start_row, [])
            if cell.column - 1 >= start_column and not is_blank(cell)
        ]

        records: list[dict[str, str]] = []
        last_row = max(rows, default=-1)
        for row in range(start_row + 1, last_row + 1):
            record: dict[str, str] = {}
            already_set = False
            cursor = 0
            for cell in rows.get(row, []):
                if cell.column - 1 < start_column:
                    continue
                if cursor >= len(headers):
                    break
                if not is_blank(cell):
                    record[headers[cursor]] = render_cell(cell)
                    already_set = True
                    cursor += 1
                elif is_bordered(cell, BorderEdge.RIGHT):
                    if already_set:
                        already_set = False
                    else:
                        cursor += 1
            records.append(record)
        return records

    # =========================================================================
    # Whole-sheet dumps
    # =========================================================================

    def as_string_list(self) -> list[list[str]]:
        """Return every existing row as a list of rendered cell values."""
        return [[render_cell(cell) for cell in cells] for cells in group_rows(self._sheet).values()]

    def to_frame(self, header: bool = True) -> pd.DataFrame:
        """Return the string dump as a DataFrame.

        Parameters
        ----------
        header : bool, optional
            Use the first row as column labels (default) instead of data.

        Returns
        -------
        pd.DataFrame
            One column per worksheet column up to the rightmost used one, with
            ``""`` for missing cells; empty for an empty sheet.
        """
        rows = group_rows(self._sheet)
        if not rows:
            return pd.DataFrame()

        # Cells keep their own column; gaps and short rows become ""
        width = max(cell.column for cells in rows.values() for cell in cells)
        padded = []
        for cells in rows.values():
            values = [""] * width
            for cell in cells:
                values[cell.column - 1] = render_cell(cell)
            padded.append(values)
        if header:
            return pd.DataFrame(padded[1:], columns=padded[0])
        return pd.DataFrame(padded)

    # =========================================================================
    # Bean marshaling
    # =========================================================================

    def to_bean_list(self, bean: type | BeanSchema) -> list[Any]:
        """Read rows below the header row into beans.

        The first existing row holds the header labels. Each following row
        becomes one bean built with no arguments; every cell under a header
        bound in the schema is assigned to its attribute as text.

        Parameters
        ----------
        bean
            A dataclass type declared with ``column()`` fields, or an explicit
            :class:`BeanSchema`.

        Raises
        ------
        BeanMappingError
            If a bean cannot be built or assigned; no partial list is returned.
        """
        schema = bean if isinstance(bean, BeanSchema) else BeanSchema.of(bean)
        rows = group_rows(self._sheet)
        if not rows:
            return []

        header_row, *data_rows = rows.items()
        attributes = {cell.column: schema.attribute_for(render_cell(cell)) for cell in header_row[1]}

        beans: list[Any] = []
        for row, cells in data_rows:
            try:
                instance = schema.bean_type()
                for cell in cells:
                    attribute = attributes.get(cell.column)
                    if attribute is not None:
                        setattr(instance, attribute, render_cell(cell))
            except Exception as exc:
                msg = f"Could not map row {row} to {schema.bean_type.__name__}: {exc}"
                raise BeanMappingError(msg, row=row) from exc
            beans.append(instance)

        logger.debug("Read %d %s bean(s) from %s", len(beans), schema.bean_type.__name__, self._sheet.title)
        return beans

    def set_bean_list(self, beans: Iterable[Any], schema: BeanSchema | None = None) -> FluentSheet:
        """Write beans into the rows directly below the header row.

        Existing rows under the header are overwritten. When the sheet is
        empty the schema's labels are written as the header in row 0 first.
        """
        return self._write_beans(beans, schema, append=False)

    def add_bean_list(self, beans: Iterable[Any], schema: BeanSchema | None = None) -> FluentSheet:
        """Append beans after the last used row."""
        return self._write_beans(beans, schema, append=True)

    def _write_beans(self, beans: Iterable[Any], schema: BeanSchema | None, append: bool) -> FluentSheet:
        if beans is None:
            msg = "Bean list is required."
            raise ValueError(msg)
        items = list(beans)
        if not items:
            return self
        if schema is None:
            schema = BeanSchema.of(type(items[0]))

        rows = group_rows(self._sheet)
        if rows:
            header_index, header_cells = next(iter(rows.items()))
            headers = [(cell.column - 1, render_cell(cell)) for cell in header_cells]
            begin_row = max(rows) + 1 if append else header_index + 1
        else:
            headers = list(enumerate(schema.labels))
            for column, label in headers:
                self.put_at(column, 0, label)
            begin_row = 1

        for offset, item in enumerate(items):
            row = begin_row + offset
            for column, label in headers:
                attribute = schema.attribute_for(label)
                if attribute is None:
                    continue
                try:
                    value = getattr(item, attribute)
                except AttributeError as exc:
                    msg = f"Bean {item!r} has no attribute {attribute!r} for column {label!r}"
                    raise BeanMappingError(msg, row=row) from exc
                try:
                    self.put_at(column, row, value)
                except ValueError as exc:
                    msg = f"Bean {item!r} has an unstorable value for column {label!r}: {exc}"
                    raise BeanMappingError(msg, row=row) from exc

        logger.debug("Wrote %d bean(s) to %s starting at row %d", len(items), self._sheet.title, begin_row)
        return self
