"""Small general-purpose helpers: reflection, iteration and text files."""

from fluent_common.utils.file import FluentFile
from fluent_common.utils.iterator import FluentIterator, IterableNode
from fluent_common.utils.reflection import FluentReflection

__all__ = [
    "FluentFile",
    "FluentIterator",
    "FluentReflection",
    "IterableNode",
]
