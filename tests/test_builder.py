"""Tests for the AssertionBuilder pipeline."""

import logging

import pytest

from alchemy_arguments import (
    AssertionBuilder,
    CheckConfig,
    FailedAssertionError,
    check_that,
    check_that_all,
)
from alchemy_arguments.assertions import non_empty_string, not_none, valid_port, valid_url
from alchemy_arguments.builder import UNEXPECTED_EXCEPTION_MESSAGE


class SQLExceptionLike(Exception):
    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause


# --- check_that ---


def test_check_that_binds_arguments():
    builder = check_that("a", "b")
    assert isinstance(builder, AssertionBuilder)
    assert builder.arguments == ("a", "b")
    assert builder.config == CheckConfig()


def test_check_that_none_is_a_single_argument():
    with pytest.raises(FailedAssertionError):
        check_that(None).is_(not_none())


def test_check_that_without_arguments_runs_nothing(recording):
    checker = recording(failing=[None])
    check_that().is_(checker)
    assert checker.seen == []


def test_check_that_all_none_binds_nothing(recording):
    checker = recording()
    check_that_all(None).are(checker)
    assert checker.seen == []


def test_check_that_all_binds_elements():
    assert check_that_all(iter([1, 2, 3])).arguments == (1, 2, 3)


def test_builder_does_not_mutate_arguments(recording):
    values = ["a", "b"]
    check_that_all(values).are(recording())
    assert values == ["a", "b"]


# --- is_ / are ---


def test_is_returns_same_builder_when_passing():
    builder = check_that("hello")
    assert builder.is_(non_empty_string()) is builder


def test_is_chains():
    builder = check_that("hello")
    assert builder.is_(not_none()).is_(non_empty_string()) is builder


def test_is_raises_failed_assertion():
    with pytest.raises(FailedAssertionError, match="non-empty"):
        check_that("").is_(non_empty_string())


def test_is_raises_original_error(recording):
    error = FailedAssertionError("original")
    with pytest.raises(FailedAssertionError) as exc_info:
        check_that("x").is_(recording(failing=["x"], error=error))
    assert exc_info.value is error


def test_is_none_raises_value_error():
    with pytest.raises(ValueError):
        check_that("x").is_(None)


def test_is_accepts_plain_callable():
    def never(argument):
        raise FailedAssertionError("never")

    with pytest.raises(FailedAssertionError, match="never"):
        check_that(1).is_(never)


def test_are_checks_every_argument(recording):
    checker = recording()
    check_that("a", "b", "c").are(checker)
    assert checker.seen == ["a", "b", "c"]


def test_are_stops_at_first_failing_argument(recording):
    checker = recording(failing=[""])
    with pytest.raises(FailedAssertionError):
        check_that_all(["a", "", "b"]).are(checker)
    assert checker.seen == ["a", ""]


def test_are_with_empty_string_in_list():
    check_that_all(["a", "b"]).are(non_empty_string())
    with pytest.raises(FailedAssertionError):
        check_that_all(["a", "b", ""]).are(non_empty_string())
    with pytest.raises(FailedAssertionError):
        check_that_all(["a", "b", ""]).is_(non_empty_string())


@pytest.mark.parametrize("port", [70000, -1, 0])
def test_invalid_port_raises(port):
    with pytest.raises(FailedAssertionError):
        check_that(port).is_(valid_port())


# --- unexpected exceptions ---


def test_unexpected_exception_is_wrapped(recording):
    cause = RuntimeError("boom")
    with pytest.raises(FailedAssertionError) as exc_info:
        check_that("x").is_(recording(failing=["x"], error=cause))

    assert str(exc_info.value) == UNEXPECTED_EXCEPTION_MESSAGE
    assert exc_info.value.cause is cause
    assert exc_info.value.__cause__ is cause


def test_unexpected_exception_from_callable_is_wrapped():
    with pytest.raises(FailedAssertionError) as exc_info:
        check_that(None).is_(lambda argument: argument.upper())
    assert isinstance(exc_info.value.cause, AttributeError)


def test_keyboard_interrupt_is_not_wrapped(recording):
    with pytest.raises(KeyboardInterrupt):
        check_that("x").is_(recording(failing=["x"], error=KeyboardInterrupt()))


# --- using_message ---


def test_using_message_overrides_message(recording):
    checker = recording(failing=["x"], error=FailedAssertionError("embedded"))

    with pytest.raises(FailedAssertionError, match="^embedded$"):
        check_that("x").is_(checker)

    with pytest.raises(FailedAssertionError) as exc_info:
        check_that("x").using_message("override").is_(checker)

    assert str(exc_info.value) == "override"
    assert str(exc_info.value.cause) == "embedded"


def test_using_message_applies_to_unexpected_exceptions(recording):
    with pytest.raises(FailedAssertionError) as exc_info:
        check_that("x").using_message("override").is_(
            recording(failing=["x"], error=TypeError("bad"))
        )

    assert str(exc_info.value) == "override"
    assert isinstance(exc_info.value.cause.cause, TypeError)


def test_using_message_returns_new_builder():
    builder = check_that("")
    overridden = builder.using_message("override")

    assert overridden is not builder
    assert builder.config.message is None
    assert overridden.config.message == "override"
    assert overridden.arguments == builder.arguments


@pytest.mark.parametrize("message", ["", None, "   "])
def test_using_message_rejects_empty(message):
    with pytest.raises(ValueError):
        check_that("x").using_message(message)


# --- throwing with a mapper ---


def test_throwing_mapper_raises_mapped_exception(recording):
    error = FailedAssertionError("failed")
    received = []

    def mapper(ex):
        received.append(ex)
        return SQLExceptionLike("mapped")

    with pytest.raises(SQLExceptionLike) as exc_info:
        check_that("x").throwing(mapper).is_(recording(failing=["x"], error=error))

    assert received == [error]
    assert exc_info.value.__cause__ is error


def test_throwing_mapper_receives_overridden_error(recording):
    received = []

    def mapper(ex):
        received.append(ex)
        return SQLExceptionLike(str(ex), ex)

    with pytest.raises(SQLExceptionLike, match="override"):
        check_that("x").using_message("override").throwing(mapper).is_(
            recording(failing=["x"])
        )

    assert str(received[0]) == "override"
    assert isinstance(received[0], FailedAssertionError)


def test_throwing_keeps_cause_set_by_mapper(recording):
    explicit_cause = KeyError("k")

    def mapper(ex):
        mapped = SQLExceptionLike("mapped")
        mapped.__cause__ = explicit_cause
        return mapped

    with pytest.raises(SQLExceptionLike) as exc_info:
        check_that("x").throwing(mapper).is_(recording(failing=["x"]))

    assert exc_info.value.__cause__ is explicit_cause


def test_throwing_identity_mapper_raises_original(recording):
    error = FailedAssertionError("failed")
    with pytest.raises(FailedAssertionError) as exc_info:
        check_that("x").throwing(lambda ex: ex).is_(recording(failing=["x"], error=error))

    assert exc_info.value is error
    assert exc_info.value.__cause__ is None


def test_throwing_mapper_returning_none_suppresses_failure(recording):
    checker = recording(failing=["a", "b"])
    builder = check_that("a", "b").throwing(lambda ex: None)

    assert builder.are(checker) is builder
    assert checker.seen == ["a", "b"]


def test_throwing_mapper_returning_non_exception_raises_type_error(recording):
    with pytest.raises(TypeError):
        check_that("x").throwing(lambda ex: "not an exception").is_(recording(failing=["x"]))


def test_throwing_none_raises_value_error():
    with pytest.raises(ValueError):
        check_that("x").throwing(None)


def test_throwing_returns_new_builder():
    builder = check_that("x")
    mapped = builder.throwing(SQLExceptionLike)

    assert mapped is not builder
    assert builder.config.exception_mapper is None
    assert mapped.config.exception_mapper is not None


def test_throwing_keeps_message_override():
    builder = check_that("").using_message("override").throwing(SQLExceptionLike)
    with pytest.raises(SQLExceptionLike, match="override"):
        builder.is_(non_empty_string())


# --- throwing with a class ---


def test_throwing_class_with_cause_constructor():
    with pytest.raises(SQLExceptionLike) as exc_info:
        check_that("bad-url").throwing(SQLExceptionLike).is_(valid_url())

    assert isinstance(exc_info.value.cause, FailedAssertionError)
    assert isinstance(exc_info.value.__cause__, FailedAssertionError)


def test_throwing_builtin_class():
    with pytest.raises(LookupError) as exc_info:
        check_that("").throwing(LookupError).is_(non_empty_string())

    assert type(exc_info.value) is LookupError
    assert isinstance(exc_info.value.__cause__, FailedAssertionError)


def test_throwing_non_exception_class_raises_value_error():
    with pytest.raises(ValueError):
        check_that("x").throwing(int)


def test_throwing_class_without_usable_constructor_raises_value_error():
    class NeedsThree(Exception):
        def __init__(self, a, b, c):
            super().__init__(a)

    with pytest.raises(ValueError, match="NeedsThree"):
        check_that("x").throwing(NeedsThree)


# --- logging ---


def test_failures_are_logged(caplog, recording):
    caplog.set_level(logging.DEBUG, logger="alchemy_arguments")

    check_that("x").throwing(lambda ex: None).is_(recording(failing=["x"]))

    assert "Check failed" in caplog.text
    assert "suppressed" in caplog.text


def test_explicit_logger_is_used(caplog, recording):
    logger = logging.getLogger("alchemy_arguments_test_explicit")
    caplog.set_level(logging.DEBUG, logger=logger.name)

    builder = check_that("x", logger=logger)
    assert builder.using_message("m").logger is logger

    with pytest.raises(FailedAssertionError):
        builder.is_(recording(failing=["x"], error=ValueError("inner")))

    records = [r for r in caplog.records if r.name == logger.name]
    assert any("ValueError" in r.getMessage() for r in records)


def test_throwing_class_with_no_args_constructor():
    class FixedMessageError(Exception):
        def __init__(self):
            super().__init__("fixed")

    with pytest.raises(FixedMessageError, match="fixed") as exc_info:
        check_that("").throwing(FixedMessageError).is_(non_empty_string())

    assert isinstance(exc_info.value.__cause__, FailedAssertionError)


def test_throwing_class_with_positional_cause():
    class WrappedError(Exception):
        def __init__(self, message, original):
            super().__init__(message)
            self.original = original

    with pytest.raises(WrappedError) as exc_info:
        check_that("").throwing(WrappedError).is_(non_empty_string())

    assert str(exc_info.value) == "expected a non-empty string"
    assert isinstance(exc_info.value.original, FailedAssertionError)
