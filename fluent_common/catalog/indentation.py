"""Indentation catalog and indent string builders."""

from __future__ import annotations

from fluent_common.catalog.base import Catalog
from fluent_common.config import DEFAULT_INDENT_SPACES, DEFAULT_INDENT_TABS

__all__ = ["Indentation"]


def _require_positive(number: int) -> None:
    # bool is an int subclass; True is not a meaningful count
    if isinstance(number, bool) or not isinstance(number, int) or number <= 0:
        msg = f"Indent count must be a positive integer, got {number!r}"
        raise ValueError(msg)


class Indentation(Catalog):
    """Space, tab and line-break tags plus repeat helpers."""

    SPACE = (0, " ")
    TAB = (1, "\t")
    RETURN = (2, "\r\n")

    @classmethod
    def space(cls) -> str:
        return cls.SPACE.tag

    @classmethod
    def tab_code(cls) -> str:
        return cls.TAB.tag

    @classmethod
    def return_code(cls) -> str:
        return cls.RETURN.tag

    @classmethod
    def indent_spaces(cls, number: int = DEFAULT_INDENT_SPACES) -> str:
        """Return ``number`` space tags joined together.

        Parameters
        ----------
        number : int, optional
            Repeat count; defaults to ``DEFAULT_INDENT_SPACES`` (4).

        Raises
        ------
        ValueError
            If ``number`` is not a positive integer.
        """
        _require_positive(number)
        return cls.space() * number

    @classmethod
    def indent_tabs(cls, number: int = DEFAULT_INDENT_TABS) -> str:
        """Return ``number`` tab tags joined together.

        Raises
        ------
        ValueError
            If ``number`` is not a positive integer.
        """
        _require_positive(number)
        return cls.tab_code() * number
