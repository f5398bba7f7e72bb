"""Request executor: runs connection calls under a retry policy.

Retries live here, above the connection, so the connection itself stays a
single exchange per call. The default NoRetryPolicy makes this a pass-through.
"""
from __future__ import annotations

import time
from typing import Any, Callable

from loguru import logger

from sfsclient.app.constants import SERVICE_NAME
from sfsclient.app.domain.result import Result
from sfsclient.app.ports.connection import Connection
from sfsclient.app.ports.retry_policy import NoRetryPolicy, RetryPolicy


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class RequestExecutor:
    def __init__(
        self,
        connection: Connection,
        retry_policy: RetryPolicy | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._connection = connection
        self._retry_policy = retry_policy or NoRetryPolicy()
        self._sleep = sleep

    def get(self, url: str) -> Result[str]:
        return self._run("GET", url, lambda: self._connection.get(url))

    def post(self, url: str, body: str) -> Result[str]:
        return self._run("POST", url, lambda: self._connection.post(url, body))

    def _run(self, method: str, url: str, call: Callable[[], Result[str]]) -> Result[str]:
        attempt = 1
        while True:
            result = call()
            if not self._retry_policy.should_retry(result, attempt):
                return result
            delay = self._retry_policy.delay(attempt)
            _log(
                "request_retry_scheduled",
                method=method,
                url=url,
                attempt=attempt,
                delay=delay,
                code=result.code.value,
            )
            self._sleep(delay)
            attempt += 1
