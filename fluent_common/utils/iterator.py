"""Forward-only cursor over a sequence with a declared size."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

__all__ = ["FluentIterator", "IterableNode"]


class IterableNode(Protocol[T_co]):
    """Anything that can hand out its nodes and how many of them to visit."""

    def nodes(self) -> Sequence[T_co]: ...

    def size(self) -> int: ...


class FluentIterator(Generic[T]):
    """Single-pass iterator whose cursor starts at 0 and only moves forward.

    Parameters
    ----------
    nodes : Sequence[T]
        Backing sequence.
    size : int | None, optional
        Number of elements to visit; defaults to ``len(nodes)``. A size larger
        than the sequence makes the first out-of-range ``next`` raise
        ``IndexError``.
    """

    def __init__(self, nodes: Sequence[T], size: int | None = None) -> None:
        if nodes is None:
            msg = "Nodes are required."
            raise ValueError(msg)
        declared = len(nodes) if size is None else size
        if declared < 0:
            msg = f"Size must not be negative, got {declared}"
            raise ValueError(msg)
        self._nodes = nodes
        self._size = declared
        self._cursor = 0

    @classmethod
    def of(cls, iterable_node: IterableNode[T]) -> FluentIterator[T]:
        """Build an iterator from an :class:`IterableNode`."""
        if iterable_node is None:
            msg = "Iterable node is required."
            raise ValueError(msg)
        return cls(iterable_node.nodes(), iterable_node.size())

    @property
    def cursor(self) -> int:
        return self._cursor

    def has_next(self) -> bool:
        return self._size > self._cursor

    def __iter__(self) -> FluentIterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        node = self._nodes[self._cursor]
        self._cursor += 1
        return node

    def __repr__(self) -> str:
        return f"FluentIterator(size={self._size}, cursor={self._cursor})"
