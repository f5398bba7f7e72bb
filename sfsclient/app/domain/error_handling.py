"""Log-and-return helpers: every failure is reported where it is detected."""
from __future__ import annotations

from typing import Any, TypeVar

from sfsclient.app.domain.result import Result, ResultCode
from sfsclient.app.ports.reporting_handler import ReportingHandler

T = TypeVar("T")


def fail_and_log(handler: ReportingHandler, code: ResultCode, message: str) -> Result[Any]:
    """Build a failed Result and report it, attributed to our caller, before handing it back."""
    result: Result[Any] = Result.failure(code, message)
    handler.log_failure(result, depth=1)
    return result


def log_if_failed(handler: ReportingHandler, result: Result[T]) -> Result[T]:
    if result.is_failure:
        handler.log_failure(result, depth=1)
    return result
