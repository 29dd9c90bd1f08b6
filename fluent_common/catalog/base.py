"""Shared behaviour for code/tag catalogs.

A catalog is an :class:`enum.Enum` whose members carry an integer ``code`` and
a string ``tag``. Members are declared as ``NAME = (code, tag)``; the set is
fixed at import time and codes are unique within a set.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Mapping


class Catalog(Enum):
    """Base enum for ``(code, tag)`` catalogs."""

    def __init__(self, code: int, tag: str) -> None:
        self.code = code
        self.tag = tag

    @classmethod
    def from_code(cls, code: int) -> Self:
        """Return the member with the given code.

        Raises
        ------
        ValueError
            If no member of this catalog uses ``code``.
        """
        for member in cls:
            if member.code == code:
                return member
        msg = f"{cls.__name__} has no member with code {code}"
        raise ValueError(msg)

    @classmethod
    def as_mapping(cls) -> Mapping[str, tuple[int, str]]:
        """Return a read-only ``name -> (code, tag)`` mapping in declaration order."""
        return MappingProxyType({member.name: (member.code, member.tag) for member in cls})

    @classmethod
    def tags(cls) -> tuple[str, ...]:
        """Return every tag in declaration order."""
        return tuple(member.tag for member in cls)
