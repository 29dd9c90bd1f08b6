"""Punctuation, quoting, path and markup catalogs."""

from __future__ import annotations

from fluent_common.catalog.base import Catalog

__all__ = ["Bracket", "EscapeSequence", "HtmlTag", "PathSeparator", "Quotation"]


class Bracket(Catalog):
    """Square brackets."""

    START = (0, "[")
    END = (1, "]")

    @classmethod
    def start(cls) -> str:
        return cls.START.tag

    @classmethod
    def end(cls) -> str:
        return cls.END.tag


class Quotation(Catalog):
    """Quote characters."""

    SINGLE_QUOTE = (0, "'")
    DOUBLE_QUOTE = (1, '"')

    @classmethod
    def single_quote(cls) -> str:
        return cls.SINGLE_QUOTE.tag

    @classmethod
    def double_quote(cls) -> str:
        return cls.DOUBLE_QUOTE.tag


class PathSeparator(Catalog):
    """Path separators for POSIX, Windows and drive-letter paths."""

    SLASH = (0, "/")
    BACK_SLASH = (1, "\\")
    COLON = (2, ":")

    @property
    def separator(self) -> str:
        """Alias of ``tag``."""
        return self.tag

    @classmethod
    def slash(cls) -> str:
        return cls.SLASH.tag

    @classmethod
    def back_slash(cls) -> str:
        return cls.BACK_SLASH.tag

    @classmethod
    def colon(cls) -> str:
        return cls.COLON.tag


class HtmlTag(Catalog):
    """Inline HTML tags used when emitting markup."""

    BREAK = (0, "<br>")
    PARAGRAPH = (1, "<p>")

    @classmethod
    def br(cls) -> str:
        return cls.BREAK.tag

    @classmethod
    def p(cls) -> str:
        return cls.PARAGRAPH.tag


class EscapeSequence(Catalog):
    """Escaped forms of whitespace and markup characters.

    The return/line-feed/double-quote entries are the literal ``\\uXXXX`` text,
    not the characters themselves; tab and single quote are the raw characters.
    """

    SPACE = (0, "&#xA0;")
    FULL_WIDTH_SPACE = (1, "&#x3000;")
    CARRIAGE_RETURN = (2, "\\u000d")
    LINE_FEED = (3, "\\u000a")
    NEW_LINE = (4, "\\u000d\\u000a")
    TAB = (5, "\t")
    LEFT_BRACKET = (6, "&lt;")
    RIGHT_BRACKET = (7, "&gt;")
    SINGLE_QUOTATION = (8, "'")
    DOUBLE_QUOTATION = (9, "\\u0022")

    @classmethod
    def space(cls) -> str:
        return cls.SPACE.tag

    @classmethod
    def full_width_space(cls) -> str:
        return cls.FULL_WIDTH_SPACE.tag

    @classmethod
    def carriage_return(cls) -> str:
        return cls.CARRIAGE_RETURN.tag

    @classmethod
    def line_feed(cls) -> str:
        return cls.LINE_FEED.tag

    @classmethod
    def new_line(cls) -> str:
        return cls.NEW_LINE.tag

    @classmethod
    def tab(cls) -> str:
        return cls.TAB.tag

    @classmethod
    def left_bracket(cls) -> str:
        return cls.LEFT_BRACKET.tag

    @classmethod
    def right_bracket(cls) -> str:
        return cls.RIGHT_BRACKET.tag

    @classmethod
    def single_quotation(cls) -> str:
        return cls.SINGLE_QUOTATION.tag

    @classmethod
    def double_quotation(cls) -> str:
        return cls.DOUBLE_QUOTATION.tag
