"""Result model: the outcome every fallible public operation returns.

A Result is either a success (optionally carrying a value) or a
(code, message) pair. Failures never cross the public boundary as exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ResultCode(str, Enum):
    OK = "Ok"
    INVALID_ARGUMENT = "InvalidArgument"
    OUT_OF_MEMORY = "OutOfMemory"
    UNEXPECTED = "Unexpected"
    CONNECTION_SETUP_FAILED = "ConnectionSetupFailed"
    CONNECTION_UNEXPECTED_ERROR = "ConnectionUnexpectedError"
    HTTP_TIMEOUT = "HttpTimeout"
    HTTP_BAD_REQUEST = "HttpBadRequest"
    HTTP_NOT_FOUND = "HttpNotFound"
    HTTP_SERVICE_NOT_AVAILABLE = "HttpServiceNotAvailable"
    HTTP_UNEXPECTED = "HttpUnexpected"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Immutable outcome of an operation (value object)."""

    code: ResultCode
    message: str = ""
    value: T | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.code, ResultCode):
            raise TypeError("result.code must be a ResultCode")
        if self.code is ResultCode.OK:
            return
        if not self.message:
            raise ValueError("a failed result must carry a message")
        if self.value is not None:
            raise ValueError("a failed result cannot carry a value")

    @staticmethod
    def success(value: T | None = None) -> "Result[T]":
        return Result(code=ResultCode.OK, value=value)

    @staticmethod
    def failure(code: ResultCode, message: str) -> "Result[T]":
        if code is ResultCode.OK:
            raise ValueError("failure() requires an error code")
        return Result(code=code, message=message)

    @property
    def is_success(self) -> bool:
        return self.code is ResultCode.OK

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def __bool__(self) -> bool:
        return self.is_success

    def __str__(self) -> str:
        if self.is_success:
            return ResultCode.OK.value
        return f"{self.code.value}: {self.message}"
