"""Client composition root: wires concrete implementations behind the ports.

Builds the reporting handler, connection, retry policy and executor from
settings and owns their lifecycle.
"""
from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from sfsclient.app.application.request_executor import RequestExecutor
from sfsclient.app.config.settings import Settings
from sfsclient.app.constants import SERVICE_NAME
from sfsclient.app.domain.error_handling import fail_and_log
from sfsclient.app.domain.result import Result, ResultCode
from sfsclient.app.infrastructure.http.factory import create_connection
from sfsclient.app.infrastructure.reporting.loguru_reporting_handler import LoguruReportingHandler
from sfsclient.app.infrastructure.retry.factory import create_retry_policy
from sfsclient.app.ports.connection import Connection
from sfsclient.app.ports.reporting_handler import ReportingHandler


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class ClientDependencies:
    """Holds wired client dependencies and their lifecycle."""

    def __init__(
        self,
        *,
        settings: Settings,
        reporting_handler: ReportingHandler | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._reporting_handler = reporting_handler or LoguruReportingHandler()
        self._transport = transport
        self._connection: Connection | None = None
        self._executor: RequestExecutor | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def reporting_handler(self) -> ReportingHandler:
        return self._reporting_handler

    @property
    def connection(self) -> Connection:
        if self._connection is None:
            raise RuntimeError("connection is not initialized")
        return self._connection

    @property
    def executor(self) -> RequestExecutor:
        if self._executor is None:
            raise RuntimeError("executor is not initialized")
        return self._executor

    def connect(self) -> Result[None]:
        try:
            retry_policy = create_retry_policy(self._settings)
        except ValueError as exc:
            return fail_and_log(self._reporting_handler, ResultCode.INVALID_ARGUMENT, str(exc))

        created = create_connection(self._reporting_handler, self._settings, transport=self._transport)
        if created.is_failure:
            return Result.failure(created.code, created.message)

        self._connection = created.value
        self._executor = RequestExecutor(self._connection, retry_policy)
        _log("client_connected", retry_policy=self._settings.retry_policy)
        return Result.success()

    def close(self) -> None:
        if self._connection is not None:
            try:
                self._connection.close()
            except Exception as exc:
                logger.warning("connection close failed: {}", exc)
            self._connection = None

        self._executor = None
        _log("client_closed")


def create_client_dependencies(settings: Settings | None = None, **kwargs: Any) -> ClientDependencies:
    return ClientDependencies(settings=settings or Settings(), **kwargs)
