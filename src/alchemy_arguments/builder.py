"""Fluent builder that runs assertions against bound arguments.

Example:
    check_that(password)
        .using_message("Invalid Password")
        .throwing(InvalidCredentialsError)
        .is_(not_none())
        .is_(non_empty_string())
        .is_(string_with_length_greater_than_or_equal_to(10))

Or with a mapper function:

    check_that(password)
        .throwing(lambda ex: BadRequestError("Bad Password"))
        .is_(non_empty_string())

Without a mapper the ``FailedAssertionError`` itself is raised.

Builders are immutable: ``using_message`` and ``throwing`` return new
builders. Use a builder within the call that created it.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, TypeVar

from alchemy_arguments.assertion import AlchemyAssertion, as_assertion
from alchemy_arguments.config import CheckConfig
from alchemy_arguments.errors import FailedAssertionError
from alchemy_arguments.mappers import DynamicExceptionSupplier, ExceptionMapper

A = TypeVar("A")
E = TypeVar("E", bound=BaseException)

LOGGER_NAME = "alchemy_arguments"
UNEXPECTED_EXCEPTION_MESSAGE = "Assertion threw an unexpected exception"


class AssertionBuilder(Generic[A, E]):
    """Runs assertions against one or more arguments and translates failures."""

    def __init__(
        self,
        arguments: Iterable[A] | None = None,
        config: CheckConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.arguments: tuple[A, ...] = tuple(arguments) if arguments is not None else ()
        self.config = config if config is not None else CheckConfig()
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def _replace(self, config: CheckConfig) -> AssertionBuilder[A, Any]:
        return AssertionBuilder(self.arguments, config=config, logger=self.logger)

    def using_message(self, message: str) -> AssertionBuilder[A, E]:
        """Replace the message of any failure raised by later checks.

        Raises:
            ValueError: If ``message`` is None or empty.
        """
        if not message:
            raise ValueError("message cannot be empty")
        return self._replace(self.config.with_message(message))

    def throwing(
        self, exception_mapper: ExceptionMapper | type[BaseException]
    ) -> AssertionBuilder[A, Any]:
        """Choose what gets raised when a check fails.

        Accepts either a mapper ``FailedAssertionError -> exception`` or an
        exception class, which is instantiated through a
        ``DynamicExceptionSupplier``. A mapper returning None suppresses the
        failure as if the check had passed.

        Raises:
            ValueError: If the mapper is None, or the class cannot be built.
        """
        if exception_mapper is None:
            raise ValueError("exception mapper cannot be None")
        if isinstance(exception_mapper, type):
            exception_mapper = DynamicExceptionSupplier(exception_mapper)
        return self._replace(self.config.with_mapper(exception_mapper))

    def is_(self, assertion: AlchemyAssertion[A] | Callable[[A], Any]) -> AssertionBuilder[A, E]:
        """Run ``assertion`` against every bound argument, in order.

        Returns this builder so checks can be chained.

        Raises:
            FailedAssertionError: If an argument fails and no mapper is installed.
            ValueError: If ``assertion`` is None.
        """
        if assertion is None:
            raise ValueError("assertion cannot be None")
        assertion = as_assertion(assertion)

        for argument in self.arguments:
            self._check(assertion, argument)
        return self

    def are(self, assertion: AlchemyAssertion[A] | Callable[[A], Any]) -> AssertionBuilder[A, E]:
        """Same as ``is_``; reads better with several arguments."""
        return self.is_(assertion)

    def _check(self, assertion: AlchemyAssertion[A], argument: A) -> None:
        try:
            assertion.check(argument)
        except FailedAssertionError as error:
            self._handle_failure(error)
        except Exception as error:
            self.logger.debug(f"{assertion!r} raised {type(error).__name__}: {error}")
            self._handle_failure(FailedAssertionError(UNEXPECTED_EXCEPTION_MESSAGE, cause=error))

    def _handle_failure(self, error: FailedAssertionError) -> None:
        self.logger.debug(f"Check failed: {error}")

        if self.config.message:
            error = FailedAssertionError(self.config.message, cause=error)

        mapper = self.config.exception_mapper
        if mapper is None:
            raise error

        mapped = mapper(error)
        if mapped is None:
            self.logger.debug("Exception mapper returned None, failure suppressed")
            return
        if not isinstance(mapped, BaseException):
            raise TypeError(
                f"exception mapper must return an exception or None, got {type(mapped).__name__}"
            )
        if mapped is error:
            raise error
        if mapped.__cause__ is None:
            raise mapped from error
        raise mapped

    def __repr__(self) -> str:
        return f"AssertionBuilder(arguments={self.arguments!r}, config={self.config!r})"


def check_that(*arguments: A, logger: logging.Logger | None = None) -> AssertionBuilder[A, FailedAssertionError]:
    """Start a chain of checks over the given arguments.

    With no arguments every later check passes without running.
    """
    return AssertionBuilder(arguments, logger=logger)


def check_that_all(
    arguments: Iterable[A] | None, logger: logging.Logger | None = None
) -> AssertionBuilder[A, FailedAssertionError]:
    """Start a chain of checks over every element of ``arguments``.

    None binds no arguments.
    """
    return AssertionBuilder(arguments, logger=logger)
