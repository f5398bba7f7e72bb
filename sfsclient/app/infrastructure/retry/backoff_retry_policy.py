"""Exponential backoff retry policy.

Delays start at initial_delay and grow by multiplier up to max_delay.
Only transient outcomes (timeouts, 503) are retried.
"""
from __future__ import annotations

from typing import Any

from sfsclient.app.domain.result import Result, ResultCode
from sfsclient.app.ports.retry_policy import RetryPolicy

RETRYABLE_CODES = frozenset({ResultCode.HTTP_TIMEOUT, ResultCode.HTTP_SERVICE_NOT_AVAILABLE})


class BackoffRetryPolicy(RetryPolicy):
    def __init__(
        self,
        initial_delay: float,
        max_delay: float,
        multiplier: float,
        max_attempts: int,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._initial_delay = initial_delay
        self._max_delay = max_delay
        self._multiplier = multiplier
        self._max_attempts = max_attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def should_retry(self, result: Result[Any], attempt: int) -> bool:
        if result.is_success or attempt >= self._max_attempts:
            return False
        return result.code in RETRYABLE_CODES

    def delay(self, attempt: int) -> float:
        delay = self._initial_delay
        for _ in range(1, attempt):
            delay = min(delay * self._multiplier, self._max_delay)
        return min(delay, self._max_delay)
