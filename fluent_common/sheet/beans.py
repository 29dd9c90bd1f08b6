"""Declared header-label <-> attribute mapping for row/bean marshaling.

Beans are usually dataclasses whose fields carry their header label:

    >>> @dataclass
    ... class Person:
    ...     name: str = column("name")
    ...     age: str = column("age")

``BeanSchema.of(Person)`` reads those labels; a schema can also be declared
by hand for classes that are not dataclasses.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["COLUMN_METADATA_KEY", "BeanSchema", "column"]

COLUMN_METADATA_KEY = "fluent_common.column"


def column(label: str, default: Any = "") -> Any:
    """Declare a dataclass field bound to the header ``label``.

    Parameters
    ----------
    label
        Header text of the worksheet column.
    default
        Field default; beans are built with no arguments, so every mapped
        field needs one.
    """
    if not label:
        msg = "Column label is required."
        raise ValueError(msg)
    return dataclasses.field(default=default, metadata={COLUMN_METADATA_KEY: label})


@dataclass(frozen=True)
class BeanSchema:
    """Mapping from header label to attribute name for one bean type."""

    bean_type: type
    columns: Mapping[str, str]

    def __post_init__(self) -> None:
        if self.bean_type is None:
            msg = "Bean type is required."
            raise ValueError(msg)
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    @classmethod
    def of(cls, bean_type: type) -> BeanSchema:
        """Build a schema from ``column()`` metadata on a dataclass.

        Raises
        ------
        TypeError
            If ``bean_type`` is not a dataclass type.
        """
        if not (isinstance(bean_type, type) and dataclasses.is_dataclass(bean_type)):
            msg = f"{bean_type!r} is not a dataclass type"
            raise TypeError(msg)

        columns = {
            f.metadata[COLUMN_METADATA_KEY]: f.name
            for f in dataclasses.fields(bean_type)
            if COLUMN_METADATA_KEY in f.metadata
        }
        return cls(bean_type, columns)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self.columns)

    def attribute_for(self, label: str) -> str | None:
        """Return the attribute bound to ``label`` or ``None``."""
        return self.columns.get(label)
