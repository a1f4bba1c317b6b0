from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from alchemy_arguments.mappers import ExceptionMapper


class CheckConfig(BaseModel):
    """Per-chain settings of an ``AssertionBuilder``.

    Attributes:
        message: Replaces the message of any failure raised by the chain.
        exception_mapper: Translates a ``FailedAssertionError`` into the
            error that is raised instead. Returning None suppresses the failure.
    """

    model_config = ConfigDict(frozen=True)

    message: str | None = None
    exception_mapper: ExceptionMapper | None = None

    @field_validator("message")
    @classmethod
    def message_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("message cannot be empty")
        return v

    def with_message(self, message: str) -> CheckConfig:
        if message is None:
            raise ValueError("message cannot be None")
        return CheckConfig(message=message, exception_mapper=self.exception_mapper)

    def with_mapper(self, exception_mapper: ExceptionMapper) -> CheckConfig:
        if exception_mapper is None:
            raise ValueError("exception mapper cannot be None")
        return CheckConfig(message=self.message, exception_mapper=exception_mapper)
