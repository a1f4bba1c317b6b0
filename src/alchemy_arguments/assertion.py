"""The assertion contract and its AND-composition."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterable, TypeVar

from alchemy_arguments.errors import FailedAssertionError

A = TypeVar("A")


class AlchemyAssertion(ABC, Generic[A]):
    """Checks a single argument for validity.

    Implementations raise ``FailedAssertionError`` when the argument fails the
    check and return normally otherwise. Any other exception raised from
    ``check`` is wrapped by the ``AssertionBuilder`` running it.

    Assertions hold no per-call state and can be shared freely.

    Example:
        valid_age = positive_integer() & less_than_or_equal_to(120)
        check_that(age).is_(valid_age)
    """

    @abstractmethod
    def check(self, argument: A) -> None:
        """Raise ``FailedAssertionError`` if ``argument`` is not valid."""
        ...

    def and_(self, other: AlchemyAssertion[A] | Callable[[A], Any]) -> AlchemyAssertion[A]:
        """Return an assertion that runs this one, then ``other``.

        The first failure wins and is raised unchanged.
        """
        if other is None:
            raise ValueError("assertion cannot be None")
        return AllOf((self, as_assertion(other)))

    def __and__(self, other: AlchemyAssertion[A]) -> AlchemyAssertion[A]:
        return self.and_(other)

    def __call__(self, argument: A) -> None:
        self.check(argument)


class AllOf(AlchemyAssertion[A]):
    """Runs assertions in order against the same argument, stopping at the first failure."""

    def __init__(self, assertions: Iterable[AlchemyAssertion[A]]):
        self.assertions = tuple(assertions)

    def check(self, argument: A) -> None:
        for assertion in self.assertions:
            assertion.check(argument)

    def __repr__(self) -> str:
        return f"AllOf({', '.join(repr(a) for a in self.assertions)})"


class FunctionAssertion(AlchemyAssertion[A]):
    """Adapts a plain ``func(argument) -> None`` into an assertion."""

    def __init__(self, func: Callable[[A], Any], name: str | None = None):
        self.func = func
        self.name = name or getattr(func, "__name__", repr(func))

    def check(self, argument: A) -> None:
        self.func(argument)

    def __repr__(self) -> str:
        return f"<assertion {self.name}>"


class Negation(AlchemyAssertion[A]):
    def __init__(self, assertion: AlchemyAssertion[A]):
        self.assertion = assertion

    def check(self, argument: A) -> None:
        try:
            self.assertion.check(argument)
        except FailedAssertionError:
            return
        raise FailedAssertionError(f"expected {self.assertion!r} to fail for {argument!r}")

    def __repr__(self) -> str:
        return f"not_({self.assertion!r})"


def assertion(func: Callable[[A], Any]) -> AlchemyAssertion[A]:
    """Decorator turning a checking function into an ``AlchemyAssertion``.

    Example:
        @assertion
        def even(n):
            if n % 2:
                raise FailedAssertionError(f"{n} is not even")
    """
    return FunctionAssertion(func)


def as_assertion(value: AlchemyAssertion[A] | Callable[[A], Any]) -> AlchemyAssertion[A]:
    if value is None:
        raise ValueError("assertion cannot be None")
    if isinstance(value, AlchemyAssertion):
        return value
    if callable(value):
        return FunctionAssertion(value)
    raise ValueError(f"{value!r} is not an assertion")


def combine(
    first: AlchemyAssertion[A] | Callable[[A], Any],
    *others: AlchemyAssertion[A] | Callable[[A], Any],
) -> AlchemyAssertion[A]:
    """Combine several assertions into one that runs them in order.

    Unlike chaining ``and_``, the assertions do not need to share a declared
    argument type. With no ``others`` the result behaves exactly like ``first``.

    Raises:
        ValueError: If ``first`` or any of ``others`` is None.
    """
    if first is None:
        raise ValueError("the first assertion cannot be None")
    if any(other is None for other in others):
        raise ValueError("combined assertions cannot be None")

    return AllOf(as_assertion(a) for a in (first, *others))


def not_(assertion: AlchemyAssertion[A] | Callable[[A], Any]) -> AlchemyAssertion[A]:
    """Invert an assertion: passes when ``assertion`` fails, fails when it passes."""
    return Negation(as_assertion(assertion))
