"""RequestExecutor and retry policies."""
from __future__ import annotations

import pytest

from sfsclient.app.application.request_executor import RequestExecutor
from sfsclient.app.domain.result import Result, ResultCode
from sfsclient.app.infrastructure.retry.backoff_retry_policy import BackoffRetryPolicy
from sfsclient.app.ports.retry_policy import NoRetryPolicy


class ScriptedConnection:
    """Implements Connection for tests; returns queued results in order."""

    def __init__(self, results: list[Result[str]]) -> None:
        self._results = list(results)
        self.calls: list[tuple[str, str, str | None]] = []

    def get(self, url: str) -> Result[str]:
        self.calls.append(("GET", url, None))
        return self._results.pop(0)

    def post(self, url: str, body: str) -> Result[str]:
        self.calls.append(("POST", url, body))
        return self._results.pop(0)

    def close(self) -> None:
        return


TIMEOUT = Result.failure(ResultCode.HTTP_TIMEOUT, "timed out")
UNAVAILABLE = Result.failure(ResultCode.HTTP_SERVICE_NOT_AVAILABLE, "503 Service Unavailable")
NOT_FOUND = Result.failure(ResultCode.HTTP_NOT_FOUND, "404 Not Found")


def test_default_policy_is_single_attempt():
    connection = ScriptedConnection([TIMEOUT])
    sleeps: list[float] = []
    executor = RequestExecutor(connection, sleep=sleeps.append)

    result = executor.get("https://feed.example.com/x")

    assert result is TIMEOUT
    assert len(connection.calls) == 1
    assert sleeps == []


def test_backoff_policy_retries_transient_failures_until_success():
    connection = ScriptedConnection([TIMEOUT, UNAVAILABLE, Result.success("body")])
    sleeps: list[float] = []
    executor = RequestExecutor(
        connection,
        BackoffRetryPolicy(1.0, 10.0, 2.0, max_attempts=3),
        sleep=sleeps.append,
    )

    result = executor.post("https://feed.example.com/x", "{}")

    assert result.value == "body"
    assert [c[0] for c in connection.calls] == ["POST", "POST", "POST"]
    assert sleeps == [1.0, 2.0]


def test_backoff_policy_stops_at_max_attempts():
    connection = ScriptedConnection([TIMEOUT, TIMEOUT, TIMEOUT])
    executor = RequestExecutor(connection, BackoffRetryPolicy(0.0, 0.0, 2.0, max_attempts=2), sleep=lambda _: None)

    result = executor.get("https://feed.example.com/x")

    assert result.code is ResultCode.HTTP_TIMEOUT
    assert len(connection.calls) == 2


def test_backoff_policy_does_not_retry_permanent_failures():
    connection = ScriptedConnection([NOT_FOUND])
    executor = RequestExecutor(connection, BackoffRetryPolicy(0.0, 0.0, 2.0, max_attempts=5), sleep=lambda _: None)

    assert executor.get("https://feed.example.com/x") is NOT_FOUND
    assert len(connection.calls) == 1


def test_backoff_delay_is_capped():
    policy = BackoffRetryPolicy(1.0, 5.0, 3.0, max_attempts=10)
    assert [policy.delay(n) for n in range(1, 5)] == [1.0, 3.0, 5.0, 5.0]


def test_backoff_rejects_zero_attempts():
    with pytest.raises(ValueError):
        BackoffRetryPolicy(1.0, 5.0, 2.0, max_attempts=0)


def test_no_retry_policy_never_retries():
    policy = NoRetryPolicy()
    assert policy.should_retry(TIMEOUT, 1) is False
    assert policy.delay(1) == 0.0
