"""Pytest configuration and fixtures."""

import logging

import pytest

from alchemy_arguments import AlchemyAssertion, FailedAssertionError


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up alchemy_arguments loggers after each test so names can be reused."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("alchemy_arguments")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


class RecordingAssertion(AlchemyAssertion):
    """Records every argument it sees and raises ``error`` for those in ``failing``."""

    def __init__(self, failing=(), error=None):
        self.failing = list(failing)
        self.error = error
        self.seen = []

    def check(self, argument):
        self.seen.append(argument)
        if argument in self.failing:
            raise self.error or FailedAssertionError(f"{argument!r} is not allowed")


@pytest.fixture
def recording():
    """Factory for assertions that remember what they checked."""

    def _make(failing=(), error=None):
        return RecordingAssertion(failing=failing, error=error)

    return _make
