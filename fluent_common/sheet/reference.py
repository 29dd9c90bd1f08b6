"""A1-style cell references and zero-based cell coordinates.

``"B7"`` names column ``B`` (index 1) and row 7 (index 6). Column letters are
bijective base-26: ``A``=0 ... ``Z``=25, ``AA``=26, ``AB``=27.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from openpyxl.utils import column_index_from_string, get_column_letter

__all__ = ["CellIndex", "column_index", "column_letters", "parse_a1", "to_a1"]

_CELL_RE = re.compile(r"([A-Za-z]+)([0-9]+)")
_LETTERS_RE = re.compile(r"[A-Za-z]+")


class CellIndex(NamedTuple):
    """Zero-based ``(column, row)`` coordinate."""

    column: int
    row: int


def column_index(letters: str) -> int:
    """Convert column letters to a zero-based column index.

    Parameters
    ----------
    letters
        One or more ASCII letters, any case (e.g. ``"ab"``).

    Returns
    -------
    int
        Zero-based index (``"A"`` -> 0, ``"AA"`` -> 26).

    Raises
    ------
    ValueError
        If ``letters`` is empty, contains non-letters, or is past ``XFD``.
    """
    if not letters or not _LETTERS_RE.fullmatch(letters):
        msg = f"Invalid column letters: {letters!r}"
        raise ValueError(msg)
    return column_index_from_string(letters.upper()) - 1


def column_letters(index: int) -> str:
    """Convert a zero-based column index back to its letters."""
    if index < 0:
        msg = f"Column index must not be negative, got {index}"
        raise ValueError(msg)
    return get_column_letter(index + 1)


def parse_a1(reference: str) -> CellIndex:
    """Parse a single-cell A1 reference such as ``"B7"``.

    Raises
    ------
    ValueError
        If ``reference`` is empty, is not letters followed by digits, or names
        row 0.
    """
    if not reference or not reference.strip():
        msg = "Cell reference is required."
        raise ValueError(msg)

    match = _CELL_RE.fullmatch(reference.strip())
    if not match:
        msg = f"Invalid A1 cell reference: {reference!r}"
        raise ValueError(msg)

    letters, digits = match.groups()
    row_number = int(digits)
    if row_number < 1:
        msg = f"Invalid row in A1 reference: {reference!r}"
        raise ValueError(msg)
    return CellIndex(column_index(letters), row_number - 1)


def to_a1(column: int, row: int) -> str:
    """Format a zero-based coordinate as an A1 reference."""
    if row < 0:
        msg = f"Row index must not be negative, got {row}"
        raise ValueError(msg)
    return f"{column_letters(column)}{row + 1}"
