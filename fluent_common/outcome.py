"""Explicit success/failure result for best-effort operations.

Reflective invocation and file writes never raise for runtime failures;
they hand back an :class:`Outcome` so callers decide whether a failure matters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from fluent_common.exceptions import FluentCommonError

T = TypeVar("T")

__all__ = ["Outcome"]


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of an operation that may fail without raising.

    Attributes
    ----------
        value: Produced value on success (may legitimately be ``None``)
        error: Failure cause; ``None`` on success
    """

    value: T | None = None
    error: FluentCommonError | None = None

    @classmethod
    def success(cls, value: T | None = None) -> Outcome[T]:
        """Wrap a successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: FluentCommonError) -> Outcome[T]:
        """Wrap a failure cause."""
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True when the operation succeeded."""
        return self.error is None

    def unwrap(self) -> T | None:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: T) -> T | None:
        """Return the value on success, otherwise ``default``."""
        return self.value if self.error is None else default
