"""Assertions on numbers."""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any

from alchemy_arguments.assertion import AlchemyAssertion, assertion
from alchemy_arguments.errors import FailedAssertionError


def _is_integer(argument: Any) -> bool:
    return isinstance(argument, int) and not isinstance(argument, bool)


def _require_number(argument: Any) -> Any:
    if argument is None:
        raise FailedAssertionError("expected a number, got None")
    if isinstance(argument, bool) or not isinstance(argument, (numbers.Real, Decimal)):
        raise FailedAssertionError(f"expected a number, got {type(argument).__name__}")
    return argument


def _check_bound(bound: Any, name: str) -> None:
    if bound is None or isinstance(bound, bool) or not isinstance(bound, (numbers.Real, Decimal)):
        raise ValueError(f"{name} must be a number, got {bound!r}")


def positive_integer() -> AlchemyAssertion[int]:
    """Passes for integers greater than zero. Booleans are rejected."""

    @assertion
    def positive_integer(argument: Any) -> None:
        if not _is_integer(argument) or argument <= 0:
            raise FailedAssertionError(f"expected a positive integer, got {argument!r}")

    return positive_integer


def non_negative_integer() -> AlchemyAssertion[int]:
    @assertion
    def non_negative_integer(argument: Any) -> None:
        if not _is_integer(argument) or argument < 0:
            raise FailedAssertionError(f"expected a non-negative integer, got {argument!r}")

    return non_negative_integer


def greater_than(exclusive_lower_bound: Any) -> AlchemyAssertion[Any]:
    _check_bound(exclusive_lower_bound, "exclusive_lower_bound")

    @assertion
    def greater_than(argument: Any) -> None:
        if not _require_number(argument) > exclusive_lower_bound:
            raise FailedAssertionError(f"expected > {exclusive_lower_bound}, got {argument}")

    return greater_than


def greater_than_or_equal_to(inclusive_lower_bound: Any) -> AlchemyAssertion[Any]:
    _check_bound(inclusive_lower_bound, "inclusive_lower_bound")

    @assertion
    def greater_than_or_equal_to(argument: Any) -> None:
        if not _require_number(argument) >= inclusive_lower_bound:
            raise FailedAssertionError(f"expected >= {inclusive_lower_bound}, got {argument}")

    return greater_than_or_equal_to


def less_than(exclusive_upper_bound: Any) -> AlchemyAssertion[Any]:
    _check_bound(exclusive_upper_bound, "exclusive_upper_bound")

    @assertion
    def less_than(argument: Any) -> None:
        if not _require_number(argument) < exclusive_upper_bound:
            raise FailedAssertionError(f"expected < {exclusive_upper_bound}, got {argument}")

    return less_than


def less_than_or_equal_to(inclusive_upper_bound: Any) -> AlchemyAssertion[Any]:
    _check_bound(inclusive_upper_bound, "inclusive_upper_bound")

    @assertion
    def less_than_or_equal_to(argument: Any) -> None:
        if not _require_number(argument) <= inclusive_upper_bound:
            raise FailedAssertionError(f"expected <= {inclusive_upper_bound}, got {argument}")

    return less_than_or_equal_to


def number_in_range(minimum: Any, maximum: Any) -> AlchemyAssertion[Any]:
    """Passes for numbers within ``[minimum, maximum]``, both ends inclusive."""
    _check_bound(minimum, "minimum")
    _check_bound(maximum, "maximum")
    if minimum > maximum:
        raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")

    @assertion
    def number_in_range(argument: Any) -> None:
        value = _require_number(argument)
        if not minimum <= value <= maximum:
            raise FailedAssertionError(f"expected a number in [{minimum}, {maximum}], got {value}")

    return number_in_range
