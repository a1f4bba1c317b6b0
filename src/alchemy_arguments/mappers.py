"""Exception mappers: turn a failed check into the error a caller wants raised."""

from __future__ import annotations

import inspect
from typing import Callable, Optional

from alchemy_arguments.errors import FailedAssertionError

ExceptionMapper = Callable[[FailedAssertionError], Optional[BaseException]]

_PROBE = object()


def identity_mapper(error: FailedAssertionError) -> FailedAssertionError:
    return error


def _uses_builtin_convention(exception_class: type, signature: inspect.Signature | None) -> bool:
    if signature is None or not inspect.isfunction(exception_class.__init__):
        return True
    kinds = {p.kind for p in signature.parameters.values()}
    return (
        inspect.Parameter.VAR_POSITIONAL in kinds
        and kinds <= {inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD}
    )


def _binds(signature: inspect.Signature, *args, **kwargs) -> bool:
    try:
        signature.bind(*args, **kwargs)
    except TypeError:
        return False
    return True


class DynamicExceptionSupplier:
    """Mapper that builds instances of an exception class.

    The constructor shape is picked once, by inspecting the class:

    - classes that keep the ``BaseException`` convention (``*args``) are
      built with ``cls(message)``
    - otherwise ``cls(message, cause=error)`` when a ``cause`` keyword fits,
      then ``cls(message, error)`` when a second positional parameter is
      required, then ``cls(message)``, then ``cls()``

    The built exception always has ``__cause__`` set to the failed check.

    Raises:
        ValueError: If ``exception_class`` is None, not an exception type,
            or has no constructor this supplier can call.
    """

    def __init__(self, exception_class: type[BaseException], default_message: str = ""):
        if exception_class is None:
            raise ValueError("exception class cannot be None")
        if not isinstance(exception_class, type) or not issubclass(exception_class, BaseException):
            raise ValueError(f"{exception_class!r} is not an exception class")

        self.exception_class = exception_class
        self.default_message = default_message
        self._shape = self._select_shape(exception_class)

    @staticmethod
    def _select_shape(exception_class: type[BaseException]) -> str:
        try:
            signature: inspect.Signature | None = inspect.signature(exception_class)
        except (TypeError, ValueError):
            signature = None

        if _uses_builtin_convention(exception_class, signature):
            return "message"
        if _binds(signature, _PROBE, cause=_PROBE):
            return "message_and_cause"
        # a required second positional parameter takes the failed check
        if _binds(signature, _PROBE, _PROBE) and not _binds(signature, _PROBE):
            return "message_and_positional_cause"
        if _binds(signature, _PROBE):
            return "message"
        if _binds(signature):
            return "empty"
        raise ValueError(
            f"{exception_class.__name__} has no usable constructor; "
            "expected (message, cause), (message) or ()"
        )

    def __call__(self, error: FailedAssertionError) -> BaseException:
        message = str(error) or self.default_message

        if self._shape == "message_and_cause":
            exception = self.exception_class(message, cause=error)
        elif self._shape == "message_and_positional_cause":
            exception = self.exception_class(message, error)
        elif self._shape == "message":
            exception = self.exception_class(message)
        else:
            exception = self.exception_class()

        exception.__cause__ = error
        return exception

    def __repr__(self) -> str:
        return f"DynamicExceptionSupplier({self.exception_class.__name__})"
