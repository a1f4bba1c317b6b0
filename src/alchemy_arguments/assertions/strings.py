"""Assertions on strings."""

from __future__ import annotations

import re
from typing import Any

from alchemy_arguments.assertion import AlchemyAssertion, assertion
from alchemy_arguments.assertions.numbers import non_negative_integer
from alchemy_arguments.builder import check_that
from alchemy_arguments.errors import FailedAssertionError

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def _require_string(argument: Any) -> str:
    if argument is None:
        raise FailedAssertionError("expected a string, got None")
    if not isinstance(argument, str):
        raise FailedAssertionError(f"expected a string, got {type(argument).__name__}")
    return argument


def _check_length_parameter(length: int, name: str = "length") -> None:
    check_that(length).throwing(ValueError).using_message(
        f"{name} must be a non-negative integer, got {length!r}"
    ).is_(non_negative_integer())


def non_empty_string() -> AlchemyAssertion[str]:
    """Fails for None, non-strings and the empty string."""

    @assertion
    def non_empty_string(argument: Any) -> None:
        if not _require_string(argument):
            raise FailedAssertionError("expected a non-empty string")

    return non_empty_string


def string_with_length(expected_length: int) -> AlchemyAssertion[str]:
    _check_length_parameter(expected_length)

    @assertion
    def string_with_length(argument: Any) -> None:
        actual = len(_require_string(argument))
        if actual != expected_length:
            raise FailedAssertionError(
                f"expected a string of length {expected_length}, got length {actual}"
            )

    return string_with_length


def string_with_length_greater_than_or_equal_to(min_length: int) -> AlchemyAssertion[str]:
    _check_length_parameter(min_length, "min_length")

    @assertion
    def string_with_length_greater_than_or_equal_to(argument: Any) -> None:
        actual = len(_require_string(argument))
        if actual < min_length:
            raise FailedAssertionError(
                f"expected a string of length >= {min_length}, got length {actual}"
            )

    return string_with_length_greater_than_or_equal_to


def string_with_length_less_than_or_equal_to(max_length: int) -> AlchemyAssertion[str]:
    _check_length_parameter(max_length, "max_length")

    @assertion
    def string_with_length_less_than_or_equal_to(argument: Any) -> None:
        actual = len(_require_string(argument))
        if actual > max_length:
            raise FailedAssertionError(
                f"expected a string of length <= {max_length}, got length {actual}"
            )

    return string_with_length_less_than_or_equal_to


def string_with_length_in_range(min_length: int, max_length: int) -> AlchemyAssertion[str]:
    """Passes for strings whose length is within ``[min_length, max_length]``."""
    _check_length_parameter(min_length, "min_length")
    _check_length_parameter(max_length, "max_length")
    if min_length > max_length:
        raise ValueError(f"min_length {min_length} is greater than max_length {max_length}")

    return (
        string_with_length_greater_than_or_equal_to(min_length)
        & string_with_length_less_than_or_equal_to(max_length)
    )


def integer_string() -> AlchemyAssertion[str]:
    """Passes for strings holding a whole number, with an optional sign."""

    @assertion
    def integer_string(argument: Any) -> None:
        text = _require_string(argument)
        if not _INTEGER_PATTERN.fullmatch(text):
            raise FailedAssertionError(f"expected an integer string, got {text!r}")

    return integer_string


def alphabetic_string() -> AlchemyAssertion[str]:
    @assertion
    def alphabetic_string(argument: Any) -> None:
        text = _require_string(argument)
        if not text.isalpha():
            raise FailedAssertionError(f"expected an alphabetic string, got {text!r}")

    return alphabetic_string


def string_with_no_whitespace() -> AlchemyAssertion[str]:
    @assertion
    def string_with_no_whitespace(argument: Any) -> None:
        text = _require_string(argument)
        if any(c.isspace() for c in text):
            raise FailedAssertionError(f"string contains whitespace: {text!r}")

    return string_with_no_whitespace


def string_containing(substring: str) -> AlchemyAssertion[str]:
    check_that(substring).throwing(ValueError).using_message(
        "substring must be a non-empty string"
    ).is_(non_empty_string())

    @assertion
    def string_containing(argument: Any) -> None:
        text = _require_string(argument)
        if substring not in text:
            raise FailedAssertionError(f"{text!r} does not contain {substring!r}")

    return string_containing


def string_matching(pattern: str | re.Pattern[str]) -> AlchemyAssertion[str]:
    """Passes for strings that match ``pattern`` in full."""
    if pattern is None:
        raise ValueError("pattern cannot be None")
    compiled = re.compile(pattern)

    @assertion
    def string_matching(argument: Any) -> None:
        text = _require_string(argument)
        if not compiled.fullmatch(text):
            raise FailedAssertionError(f"{text!r} does not match pattern {compiled.pattern!r}")

    return string_matching
