from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from sfsclient.app.constants import MAX_RESPONSE_CHARACTERS
from sfsclient.app.domain.result import Result
from sfsclient.app.infrastructure.http.httpx_connection import HttpxConnection
from sfsclient.app.infrastructure.http.transport_handle import TransportHandle


class FakeReportingHandler:
    """Implements ReportingHandler for tests; records every event and failure."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []
        self.failures: list[Result[Any]] = []

    def log(self, level: str, event: str, *, depth: int = 0, **fields: Any) -> None:
        self.events.append((level, event, fields))

    def log_failure(self, result: Result[Any], *, depth: int = 0, **fields: Any) -> None:
        if result.is_failure:
            self.failures.append(result)

    def event_names(self) -> list[str]:
        return [event for _, event, _ in self.events]


Responder = Callable[[httpx.Request], httpx.Response]


@pytest.fixture()
def reporting_handler() -> FakeReportingHandler:
    return FakeReportingHandler()


@pytest.fixture()
def make_connection(reporting_handler: FakeReportingHandler):
    """Build an HttpxConnection over httpx.MockTransport; returns (connection, handle, seen requests)."""
    created: list[HttpxConnection] = []

    def _make(
        respond: Responder,
        *,
        max_response_characters: int = MAX_RESPONSE_CHARACTERS,
    ) -> tuple[HttpxConnection, TransportHandle, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return respond(request)

        handle = TransportHandle(transport=httpx.MockTransport(_handler))
        connection = HttpxConnection(
            handle,
            reporting_handler,
            max_response_characters=max_response_characters,
        )
        created.append(connection)
        return connection, handle, requests

    yield _make

    for connection in created:
        connection.close()
