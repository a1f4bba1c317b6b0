"""Assertions on collections and mappings."""

from __future__ import annotations

from collections.abc import Container, Mapping, Sized
from typing import Any

from alchemy_arguments.assertion import AlchemyAssertion, assertion
from alchemy_arguments.assertions.numbers import non_negative_integer
from alchemy_arguments.builder import check_that
from alchemy_arguments.errors import FailedAssertionError


def _require_sized(argument: Any) -> Sized:
    if argument is None:
        raise FailedAssertionError("expected a collection, got None")
    if not isinstance(argument, Sized):
        raise FailedAssertionError(f"expected a collection, got {type(argument).__name__}")
    return argument


def non_empty() -> AlchemyAssertion[Sized]:
    """Fails for None and for collections without elements."""

    @assertion
    def non_empty(argument: Any) -> None:
        if len(_require_sized(argument)) == 0:
            raise FailedAssertionError("collection is empty")

    return non_empty


def collection_of_size(size: int) -> AlchemyAssertion[Sized]:
    check_that(size).throwing(ValueError).using_message(
        f"size must be a non-negative integer, got {size!r}"
    ).is_(non_negative_integer())

    @assertion
    def collection_of_size(argument: Any) -> None:
        actual = len(_require_sized(argument))
        if actual != size:
            raise FailedAssertionError(f"expected a collection of size {size}, got size {actual}")

    return collection_of_size


def element_in_collection(element: Any) -> AlchemyAssertion[Container]:
    """Passes for collections containing ``element``."""

    @assertion
    def element_in_collection(argument: Any) -> None:
        if argument is None or not isinstance(argument, Container):
            raise FailedAssertionError(f"expected a collection, got {argument!r}")
        if element not in argument:
            raise FailedAssertionError(f"{element!r} not found in collection")

    return element_in_collection


def key_in_map(key: Any) -> AlchemyAssertion[Mapping]:
    @assertion
    def key_in_map(argument: Any) -> None:
        if not isinstance(argument, Mapping):
            raise FailedAssertionError(f"expected a mapping, got {type(argument).__name__}")
        if key not in argument:
            raise FailedAssertionError(f"key {key!r} not found in mapping")

    return key_in_map
