"""Assertions on postal address components."""

from __future__ import annotations

from typing import Any

from alchemy_arguments.assertion import AlchemyAssertion, assertion
from alchemy_arguments.assertions.strings import (
    non_empty_string,
    string_matching,
    string_with_length,
    string_with_length_in_range,
)
from alchemy_arguments.builder import check_that


def valid_zip_code() -> AlchemyAssertion[str]:
    """Passes for zip codes of 4 or 5 characters.

    Zip codes are not necessarily digits, so only the length is checked.
    """
    length = string_with_length_in_range(4, 5)

    @assertion
    def valid_zip_code(zip_code: Any) -> None:
        check_that(zip_code).using_message("zip must consist of 4-5 characters").is_(length)

    return valid_zip_code


def valid_zip_code_string() -> AlchemyAssertion[str]:
    """Passes for 5-digit numeric zip codes, leading zeros allowed (e.g. ``01693``)."""
    checks = (
        non_empty_string()
        & string_matching(r"\d+")
        & string_with_length(5)
        & valid_zip_code()
    )

    @assertion
    def valid_zip_code_string(zip_code: Any) -> None:
        check_that(zip_code).using_message(
            f"expected a 5-digit zip code, got {zip_code!r}"
        ).is_(checks)

    return valid_zip_code_string
