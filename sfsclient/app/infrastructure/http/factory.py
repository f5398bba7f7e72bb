"""Connection factory: builds a Connection from settings and reports setup failures as a Result."""
from __future__ import annotations

import httpx

from sfsclient.app.config.settings import Settings
from sfsclient.app.domain.error_handling import fail_and_log
from sfsclient.app.domain.result import Result, ResultCode
from sfsclient.app.infrastructure.http.httpx_connection import HttpxConnection
from sfsclient.app.infrastructure.http.transport_handle import TransportHandle, TransportSetupError
from sfsclient.app.ports.connection import Connection
from sfsclient.app.ports.reporting_handler import ReportingHandler


def create_connection(
    handler: ReportingHandler,
    settings: Settings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> Result[Connection]:
    """Build a Connection; handle creation failures come back as CONNECTION_SETUP_FAILED.

    transport replaces the network layer (httpx.MockTransport in tests).
    """
    settings = settings or Settings()
    timeout = httpx.Timeout(
        settings.read_timeout_seconds,
        connect=settings.connect_timeout_seconds,
    )
    headers = {"User-Agent": settings.user_agent} if settings.user_agent else None
    try:
        handle = TransportHandle(timeout=timeout, transport=transport, headers=headers)
    except TransportSetupError as exc:
        return fail_and_log(handler, ResultCode.CONNECTION_SETUP_FAILED, str(exc))

    return Result.success(
        HttpxConnection(
            handle,
            handler,
            max_response_characters=settings.max_response_characters,
        )
    )
