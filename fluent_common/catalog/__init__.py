"""Immutable ``(code, tag)`` catalogs for symbols, escapes and indentation."""

from fluent_common.catalog.base import Catalog
from fluent_common.catalog.indentation import Indentation
from fluent_common.catalog.symbols import (
    Bracket,
    EscapeSequence,
    HtmlTag,
    PathSeparator,
    Quotation,
)

__all__ = [
    "Bracket",
    "Catalog",
    "EscapeSequence",
    "HtmlTag",
    "Indentation",
    "PathSeparator",
    "Quotation",
]
