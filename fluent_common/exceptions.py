"""Exception hierarchy for fluent-common.

Argument problems are reported with the built-in ``ValueError``/``TypeError``;
the classes below cover failures that happen while doing the work.
"""

from __future__ import annotations

__all__ = [
    "BeanMappingError",
    "FileHandlingError",
    "FluentCommonError",
    "ReflectionError",
    "SheetHandlingError",
]


class FluentCommonError(Exception):
    """Base class for every error raised by this package."""


class SheetHandlingError(FluentCommonError):
    """A worksheet lookup could not be satisfied (e.g. the cell does not exist)."""


class BeanMappingError(SheetHandlingError):
    """A row could not be mapped to or from a bean.

    Attributes
    ----------
    row : int | None
        Zero-based worksheet row that failed, when known.
    """

    def __init__(self, message: str, row: int | None = None) -> None:
        super().__init__(message)
        self.row = row


class ReflectionError(FluentCommonError):
    """Locating or invoking a method by name failed."""


class FileHandlingError(FluentCommonError):
    """Writing a text file failed."""
