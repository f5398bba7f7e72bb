"""Retry policy port: decides whether a failed Result is attempted again, and when."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from sfsclient.app.domain.result import Result


@runtime_checkable
class RetryPolicy(Protocol):
    def should_retry(self, result: Result[Any], attempt: int) -> bool:
        """attempt is 1-based: the number of the attempt that produced result."""
        ...

    def delay(self, attempt: int) -> float:
        """Seconds to wait before the attempt following attempt."""
        ...


class NoRetryPolicy(RetryPolicy):
    """Default policy: every Result is final."""

    def should_retry(self, result: Result[Any], attempt: int) -> bool:
        return False

    def delay(self, attempt: int) -> float:
        return 0.0
