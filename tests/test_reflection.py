"""Tests for reflective method invocation."""

from __future__ import annotations

import pytest

from fluent_common import ReflectionError
from fluent_common.utils import FluentReflection


class Greeter:
    """Target type with instance, static and class methods."""

    def __init__(self) -> None:
        self.prefix = "Hello"

    def greet(self, name: str) -> str:
        return f"{self.prefix}, {name}"

    def greet_all(self, first: str, second: str) -> str:
        return f"{self.prefix}, {first} and {second}"

    def nothing(self) -> None:
        return None

    def boom(self) -> None:
        msg = "boom"
        raise RuntimeError(msg)

    @staticmethod
    def add(a: int, b: int) -> int:
        return a + b

    @classmethod
    def kind(cls) -> str:
        return cls.__name__


class NeedsArguments:
    """Target type without a no-argument constructor."""

    def __init__(self, value: int) -> None:
        self.value = value

    def get(self) -> int:
        return self.value

    @staticmethod
    def double(value: int) -> int:
        return value * 2


class TestInvoke:
    """Tests for instance-method invocation."""

    def test_without_arguments(self) -> None:
        """Zero-argument signature is used when nothing was added."""
        outcome = FluentReflection(Greeter).invoke("kind")

        assert outcome.ok
        assert outcome.value == "Greeter"

    def test_with_arguments(self) -> None:
        """Accumulated arguments are passed in order."""
        outcome = FluentReflection[str](Greeter).add(str, "Ada").add(str, "Alan").invoke("greet_all")

        assert outcome.unwrap() == "Hello, Ada and Alan"

    def test_none_result_is_success(self) -> None:
        """A method returning None still reports success."""
        outcome = FluentReflection(Greeter).invoke("nothing")

        assert outcome.ok
        assert outcome.value is None

    def test_missing_method(self) -> None:
        """Unknown names come back as a failed outcome."""
        outcome = FluentReflection(Greeter).invoke("missing")

        assert not outcome.ok
        assert isinstance(outcome.error, ReflectionError)
        with pytest.raises(ReflectionError, match="Greeter.missing"):
            outcome.unwrap()

    def test_argument_type_mismatch(self) -> None:
        """Values must match their declared types."""
        outcome = FluentReflection(Greeter).add(int, "Ada").invoke("greet")

        assert not outcome.ok
        assert "declared int" in str(outcome.error)

    def test_arity_mismatch(self) -> None:
        """Arguments must bind to the method signature."""
        outcome = FluentReflection(Greeter).add(str, "a").add(str, "b").invoke("greet")

        assert not outcome.ok
        assert "does not accept 2 argument(s)" in str(outcome.error)

    def test_method_raises(self) -> None:
        """Exceptions from the method are captured and chained."""
        outcome = FluentReflection(Greeter).invoke("boom")

        assert not outcome.ok
        assert isinstance(outcome.error.__cause__, RuntimeError)

    def test_constructor_needs_arguments(self) -> None:
        """Instantiation failures are reported, not raised."""
        outcome = FluentReflection(NeedsArguments).invoke("get")

        assert not outcome.ok
        assert isinstance(outcome.error.__cause__, TypeError)


class TestInvokeStatic:
    """Tests for static and class method invocation."""

    def test_static_method(self) -> None:
        """Static methods run without an instance."""
        outcome = FluentReflection[int](Greeter).add(int, 2).add(int, 3).invoke_static("add")

        assert outcome.unwrap() == 5

    def test_class_method(self) -> None:
        """Class methods are accepted as static calls."""
        assert FluentReflection(Greeter).invoke_static("kind").unwrap() == "Greeter"

    def test_instance_method_is_not_static(self) -> None:
        """Plain instance methods cannot be called statically."""
        outcome = FluentReflection(Greeter).add(str, "Ada").invoke_static("greet")

        assert not outcome.ok
        assert "not a static or class method" in str(outcome.error)

    def test_static_on_type_without_default_constructor(self) -> None:
        """Static calls never instantiate the target."""
        outcome = FluentReflection[int](NeedsArguments).add(int, 21).invoke_static("double")

        assert outcome.unwrap() == 42


class TestArgumentValidation:
    """Tests for caller errors that are raised immediately."""

    def test_empty_method_name(self) -> None:
        """An empty method name raises ValueError."""
        with pytest.raises(ValueError, match="Method name is required"):
            FluentReflection(Greeter).invoke("")

    def test_none_argument(self) -> None:
        """None types or values are rejected by add()."""
        with pytest.raises(ValueError, match="Argument type and value"):
            FluentReflection(Greeter).add(str, None)

    def test_none_target(self) -> None:
        """A target type is required."""
        with pytest.raises(ValueError, match="Target type"):
            FluentReflection(None)  # type: ignore[arg-type]

    def test_argument_views(self) -> None:
        """Declared types and values are exposed in order."""
        reflection = FluentReflection(Greeter).add(str, "a").add(int, 1)

        assert reflection.argument_types == (str, int)
        assert reflection.argument_values == ("a", 1)
        assert reflection.target is Greeter
