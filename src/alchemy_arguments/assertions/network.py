"""Assertions on network values: URLs, ports and IP addresses."""

from __future__ import annotations

import ipaddress
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from alchemy_arguments.assertion import AlchemyAssertion, assertion
from alchemy_arguments.assertions.strings import non_empty_string
from alchemy_arguments.errors import FailedAssertionError

MIN_PORT = 1
MAX_PORT = 65535

_URL_ADAPTER = TypeAdapter(AnyUrl)


def valid_url() -> AlchemyAssertion[str]:
    """Passes for absolute URLs, i.e. with a scheme such as ``http://``."""
    not_empty = non_empty_string()

    @assertion
    def valid_url(argument: Any) -> None:
        not_empty.check(argument)
        try:
            _URL_ADAPTER.validate_python(argument)
        except ValidationError as e:
            raise FailedAssertionError(f"invalid URL: {argument!r}", cause=e) from e

    return valid_url


def valid_port() -> AlchemyAssertion[int]:
    """Passes for integer ports in ``1..65535``."""

    @assertion
    def valid_port(argument: Any) -> None:
        if not isinstance(argument, int) or isinstance(argument, bool):
            raise FailedAssertionError(f"expected an integer port, got {argument!r}")
        if not MIN_PORT <= argument <= MAX_PORT:
            raise FailedAssertionError(
                f"invalid port: {argument}; must be in [{MIN_PORT}, {MAX_PORT}]"
            )

    return valid_port


def valid_ipv4_address() -> AlchemyAssertion[str]:
    """Passes for dotted-quad IPv4 addresses such as ``192.168.1.10``."""
    not_empty = non_empty_string()

    @assertion
    def valid_ipv4_address(argument: Any) -> None:
        not_empty.check(argument)
        try:
            ipaddress.IPv4Address(argument)
        except ValueError as e:
            raise FailedAssertionError(f"invalid IPv4 address: {argument!r}", cause=e) from e

    return valid_ipv4_address
