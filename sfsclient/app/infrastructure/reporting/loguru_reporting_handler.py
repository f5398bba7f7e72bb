"""ReportingHandler implementation backed by loguru."""
from __future__ import annotations

from typing import Any

from loguru import logger

from sfsclient.app.constants import SERVICE_NAME
from sfsclient.app.domain.result import Result
from sfsclient.app.ports.reporting_handler import ReportingHandler


class LoguruReportingHandler(ReportingHandler):
    """Emits events as bound loguru records (service_name, event, extra fields).

    The record's file, line and function point at the caller, shifted by depth.
    """

    def __init__(self, service_name: str = SERVICE_NAME) -> None:
        self._service_name = service_name

    def log(self, level: str, event: str, *, depth: int = 0, **fields: Any) -> None:
        logger.bind(service_name=self._service_name, event=event, **fields).opt(depth=depth + 1).log(
            level.upper(), ""
        )

    def log_failure(self, result: Result[Any], *, depth: int = 0, **fields: Any) -> None:
        if result.is_success:
            return
        self.log(
            "error",
            "operation_failed",
            depth=depth + 1,
            code=result.code.value,
            error=result.message,
            **fields,
        )
