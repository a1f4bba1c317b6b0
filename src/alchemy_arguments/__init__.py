"""Fluent argument checks.

    from alchemy_arguments import check_that
    from alchemy_arguments.assertions import non_empty_string, valid_port

    check_that(host).is_(non_empty_string())
    check_that(port).throwing(ConfigError).is_(valid_port())
"""

from alchemy_arguments.assertion import AlchemyAssertion, assertion, combine, not_
from alchemy_arguments.builder import AssertionBuilder, check_that, check_that_all
from alchemy_arguments.config import CheckConfig
from alchemy_arguments.errors import FailedAssertionError
from alchemy_arguments.mappers import DynamicExceptionSupplier, ExceptionMapper
from alchemy_arguments.verbose import setup_logger

__all__ = [
    "AlchemyAssertion",
    "AssertionBuilder",
    "CheckConfig",
    "DynamicExceptionSupplier",
    "ExceptionMapper",
    "FailedAssertionError",
    "assertion",
    "check_that",
    "check_that_all",
    "combine",
    "not_",
    "setup_logger",
]
