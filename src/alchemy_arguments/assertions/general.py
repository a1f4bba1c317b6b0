"""General-purpose assertions that apply to any argument."""

from __future__ import annotations

from typing import Any

from alchemy_arguments.assertion import AlchemyAssertion, assertion
from alchemy_arguments.errors import FailedAssertionError


def not_none() -> AlchemyAssertion[Any]:
    """Fails when the argument is None."""

    @assertion
    def not_none(argument: Any) -> None:
        if argument is None:
            raise FailedAssertionError("argument is None")

    return not_none


def none() -> AlchemyAssertion[Any]:
    @assertion
    def none(argument: Any) -> None:
        if argument is not None:
            raise FailedAssertionError(f"expected None, got {argument!r}")

    return none


def equal_to(other: Any) -> AlchemyAssertion[Any]:
    """Passes when the argument compares equal to ``other``."""

    @assertion
    def equal_to(argument: Any) -> None:
        if argument != other:
            raise FailedAssertionError(f"expected {other!r}, got {argument!r}")

    return equal_to


def same_instance_as(other: Any) -> AlchemyAssertion[Any]:
    """Passes only for the very object ``other``, not an equal copy."""

    @assertion
    def same_instance_as(argument: Any) -> None:
        if argument is not other:
            raise FailedAssertionError(f"{argument!r} is not the same instance as {other!r}")

    return same_instance_as


def instance_of(cls: type | tuple[type, ...]) -> AlchemyAssertion[Any]:
    if cls is None:
        raise ValueError("class cannot be None")

    @assertion
    def instance_of(argument: Any) -> None:
        if not isinstance(argument, cls):
            raise FailedAssertionError(
                f"expected an instance of {cls!r}, got {type(argument).__name__}"
            )

    return instance_of
