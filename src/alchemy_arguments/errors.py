"""Error types raised by argument checks."""

from __future__ import annotations


class FailedAssertionError(ValueError):
    """Raised when an argument fails an assertion.

    Extends ``ValueError`` so that a failed check reads as an invalid
    argument unless a builder remaps it with ``throwing(...)``.

    Attributes:
        message: Human-readable description of the failure.
        cause: The underlying error, if this failure wraps another one.
            Also chained as ``__cause__``.
    """

    def __init__(self, message: str = "", cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message
