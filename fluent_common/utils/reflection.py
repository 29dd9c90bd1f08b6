"""Invoke a method by name with explicitly typed arguments.

``FluentReflection`` collects ``(type, value)`` pairs, locates the named
method on a target type and calls it either on a fresh instance or directly on
the type. Runtime failures come back as a failed :class:`Outcome` instead of
propagating, so callers can tell "returned None" apart from "did not run".
"""

from __future__ import annotations

import inspect
from typing import Any, Generic, TypeVar

from fluent_common.config import setup_logging
from fluent_common.exceptions import ReflectionError
from fluent_common.outcome import Outcome

logger = setup_logging(__name__)

T = TypeVar("T")

__all__ = ["FluentReflection"]


class FluentReflection(Generic[T]):
    """Fluent builder for reflective method calls.

    Examples
    --------
    >>> FluentReflection(str).add(str, "a,b").add(str, ",").invoke("split")  # doctest: +SKIP
    """

    def __init__(self, target: type) -> None:
        if target is None:
            msg = "Target type is required."
            raise ValueError(msg)
        self._target = target
        self._parameters: list[tuple[type, Any]] = []

    @property
    def target(self) -> type:
        return self._target

    @property
    def argument_types(self) -> tuple[type, ...]:
        return tuple(argument_type for argument_type, _ in self._parameters)

    @property
    def argument_values(self) -> tuple[Any, ...]:
        return tuple(value for _, value in self._parameters)

    def add(self, argument_type: type, argument_value: Any) -> FluentReflection[T]:
        """Append one typed argument and return self for chaining.

        Raises
        ------
        ValueError
            If either the type or the value is ``None``.
        """
        if argument_type is None or argument_value is None:
            msg = "Argument type and value are required."
            raise ValueError(msg)
        self._parameters.append((argument_type, argument_value))
        return self

    def invoke(self, method_name: str) -> Outcome[T]:
        """Instantiate the target with no arguments and call ``method_name`` on it."""
        return self._invoke(method_name, is_static=False)

    def invoke_static(self, method_name: str) -> Outcome[T]:
        """Call a static or class method ``method_name`` on the target type."""
        return self._invoke(method_name, is_static=True)

    def _invoke(self, method_name: str, is_static: bool) -> Outcome[T]:
        if not method_name:
            msg = "Method name is required."
            raise ValueError(msg)

        try:
            method = self._locate(method_name, is_static)
            receiver = method if is_static else getattr(self._target(), method_name)
            self._check_signature(receiver, method_name)
            result = receiver(*self.argument_values)
        except Exception as exc:
            qualified = f"{self._target.__name__}.{method_name}"
            logger.warning("Reflective call %s failed: %s", qualified, exc)
            error = ReflectionError(f"Could not invoke {qualified}: {exc}")
            error.__cause__ = exc
            return Outcome.failure(error)

        return Outcome.success(result)

    def _locate(self, method_name: str, is_static: bool) -> Any:
        try:
            raw = inspect.getattr_static(self._target, method_name)
        except AttributeError:
            msg = f"{self._target.__name__} has no attribute {method_name!r}"
            raise ReflectionError(msg) from None

        if is_static and not isinstance(raw, (staticmethod, classmethod)):
            msg = f"{method_name!r} is not a static or class method"
            raise ReflectionError(msg)

        method = getattr(self._target, method_name)
        if not callable(method):
            msg = f"{method_name!r} is not callable"
            raise ReflectionError(msg)
        return method

    def _check_signature(self, receiver: Any, method_name: str) -> None:
        for position, (argument_type, value) in enumerate(self._parameters):
            if not isinstance(value, argument_type):
                msg = (
                    f"Argument {position} of {method_name!r} is {type(value).__name__}, "
                    f"declared {argument_type.__name__}"
                )
                raise ReflectionError(msg)

        try:
            signature = inspect.signature(receiver)
        except (TypeError, ValueError):
            # builtins without introspectable signatures are checked by the call itself
            return
        try:
            signature.bind(*self.argument_values)
        except TypeError as exc:
            msg = f"{method_name!r} does not accept {len(self._parameters)} argument(s)"
            raise ReflectionError(msg) from exc
