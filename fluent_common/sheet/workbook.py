"""Thin workbook wrapper that hands out ``FluentSheet`` views."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from openpyxl import Workbook, load_workbook

from fluent_common.config import setup_logging
from fluent_common.exceptions import SheetHandlingError
from fluent_common.sheet.sheet import FluentSheet

if TYPE_CHECKING:
    import os

logger = setup_logging(__name__)

__all__ = ["FluentWorkbook"]


class FluentWorkbook:
    """Open, create and save workbooks; expose their worksheets as ``FluentSheet``."""

    def __init__(self, workbook: Workbook | None = None) -> None:
        self._workbook = workbook if workbook is not None else Workbook()

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> FluentWorkbook:
        """Load an ``.xlsx`` file with styles so border lookups work.

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist.
        """
        filepath = Path(path)
        if not filepath.exists():
            msg = f"Workbook not found: {filepath}"
            raise FileNotFoundError(msg)

        logger.info("Loading workbook: %s", filepath)
        return cls(load_workbook(filepath))

    @property
    def workbook(self) -> Workbook:
        return self._workbook

    @property
    def sheet_names(self) -> list[str]:
        return list(self._workbook.sheetnames)

    def sheet(self, name: str | None = None) -> FluentSheet:
        """Return the named worksheet, or the active one when ``name`` is None.

        Raises
        ------
        SheetHandlingError
            If no worksheet has that name.
        """
        if name is None:
            return FluentSheet(self._workbook.active)
        if name not in self._workbook.sheetnames:
            msg = f"Worksheet {name!r} does not exist. Available: {self.sheet_names}"
            raise SheetHandlingError(msg)
        return FluentSheet(self._workbook[name])

    def create_sheet(self, name: str) -> FluentSheet:
        """Add a worksheet at the end of the workbook and return its view."""
        if not name:
            msg = "Worksheet name is required."
            raise ValueError(msg)
        return FluentSheet(self._workbook.create_sheet(title=name))

    def save(self, path: str | os.PathLike[str]) -> Path:
        """Save the workbook, creating parent directories as needed."""
        filepath = Path(path)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        self._workbook.save(filepath)
        logger.info("Workbook saved: %s", filepath)
        return filepath
